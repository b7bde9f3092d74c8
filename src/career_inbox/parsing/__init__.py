"""Platform classification and field extraction for confirmation emails."""

from .registry import (
    FieldPattern,
    PlatformRule,
    PlatformRegistry,
    RegistryError,
    build_default_registry,
    default_registry,
    make_rule
)
from .classifier import PlatformClassifier
from .extractor import (
    FieldExtractor,
    ExtractedFields
)
from .pipeline import (
    ApplicationEmailParser,
    parse_application_email
)
from .samples import (
    generate_sample_emails,
    import_sample_applications
)

__all__ = [
    "FieldPattern",
    "PlatformRule",
    "PlatformRegistry",
    "RegistryError",
    "build_default_registry",
    "default_registry",
    "make_rule",
    "PlatformClassifier",
    "FieldExtractor",
    "ExtractedFields",
    "ApplicationEmailParser",
    "parse_application_email",
    "generate_sample_emails",
    "import_sample_applications"
]
