"""Platform detection for application confirmation emails."""

from typing import Optional

from career_inbox.parsing.registry import PlatformRegistry, default_registry
from career_inbox.utils.logging import get_logger

logger = get_logger(__name__)


class PlatformClassifier:
    """Determines which job platform produced an email."""
    
    def __init__(self, registry: Optional[PlatformRegistry] = None):
        self.logger = logger.bind(component="platform_classifier")
        self.registry = registry if registry is not None else default_registry()
    
    def classify(self, sender: Optional[str], content: Optional[str]) -> Optional[str]:
        """
        Return the name of the first platform whose rules match.
        
        Rules are tried in registry order. For each rule the sender domain is
        checked before the content signatures, and the first success wins.
        
        Args:
            sender: Sender address, may be empty
            content: Subject and body text, may be empty
            
        Returns:
            Platform name, or None when no rule matches
        """
        sender = sender or ""
        content = content or ""
        
        for rule in self.registry:
            if rule.matches_sender(sender):
                self.logger.debug("Platform matched on sender", platform=rule.name)
                return rule.name
            
            if rule.matches_content(content):
                self.logger.debug("Platform matched on content", platform=rule.name)
                return rule.name
        
        return None
