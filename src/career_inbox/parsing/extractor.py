"""Field extraction from application confirmation emails."""

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from career_inbox.parsing.registry import (
    EXTRACTABLE_FIELDS,
    PlatformRegistry,
    PlatformRule,
    default_registry
)
from career_inbox.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ExtractedFields:
    """Raw extraction result; a field is None when no pattern matched."""
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    
    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)
    
    @property
    def missing(self) -> list:
        return [name for name in EXTRACTABLE_FIELDS if getattr(self, name) is None]


class FieldExtractor:
    """Pulls title, company and location out of email text."""
    
    def __init__(self, registry: Optional[PlatformRegistry] = None):
        self.logger = logger.bind(component="field_extractor")
        self.registry = registry if registry is not None else default_registry()
    
    def extract(self, platform: Optional[str], content: Optional[str]) -> ExtractedFields:
        """
        Run each field's pattern chain for the given platform.
        
        The first pattern producing a non-empty capture wins for each field.
        An unknown platform or empty content yields an all-None result.
        """
        result = ExtractedFields()
        rule = self.registry.get(platform)
        
        if rule is None or not content:
            return result
        
        for field_name in EXTRACTABLE_FIELDS:
            setattr(result, field_name, self._first_match(rule, field_name, content))
        
        if result.missing:
            self.logger.debug(
                "Partial extraction",
                platform=platform,
                missing=result.missing
            )
        
        return result
    
    def _first_match(self, rule: PlatformRule, field_name: str, content: str) -> Optional[str]:
        for field_pattern in rule.patterns_for(field_name):
            value = field_pattern.search(content)
            if value:
                return value
        return None
