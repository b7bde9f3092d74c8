"""Known job platforms and the patterns used to recognise their emails."""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

EXTRACTABLE_FIELDS = ("title", "company", "location")


class RegistryError(ValueError):
    """Raised when a platform registry definition is invalid."""


@dataclass(frozen=True)
class FieldPattern:
    """A regex and the capture group holding the extracted value."""
    pattern: "re.Pattern[str]"
    group: int = 1

    def search(self, text: str) -> Optional[str]:
        match = self.pattern.search(text)
        if not match:
            return None
        value = match.group(self.group)
        if value is None:
            return None
        value = value.strip()
        return value or None


@dataclass(frozen=True)
class PlatformRule:
    """Recognition and extraction rules for a single platform."""
    name: str
    sender_domains: Tuple[str, ...]
    content_signatures: Tuple["re.Pattern[str]", ...]
    field_extractors: Mapping[str, Tuple[FieldPattern, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def matches_sender(self, sender: str) -> bool:
        sender_lower = sender.lower()
        return any(domain in sender_lower for domain in self.sender_domains)

    def matches_content(self, content: str) -> bool:
        content_lower = content.lower()
        return any(signature.search(content_lower) for signature in self.content_signatures)

    def patterns_for(self, field_name: str) -> Tuple[FieldPattern, ...]:
        return self.field_extractors.get(field_name, ())


PatternEntry = Union[str, Tuple[str, int]]


def make_rule(
    name: str,
    sender_domains: Iterable[str],
    content_signatures: Iterable[str],
    extractors: Mapping[str, Sequence[PatternEntry]]
) -> PlatformRule:
    """
    Build an immutable rule from plain pattern strings.

    Extractor entries are either a pattern string (capture group 1) or a
    ``(pattern, group)`` tuple. All patterns are compiled case-insensitively
    unless they carry their own inline flags. A group number the pattern
    does not define raises RegistryError.
    """
    if not name:
        raise RegistryError("Platform name must not be empty")

    unknown = set(extractors) - set(EXTRACTABLE_FIELDS)
    if unknown:
        raise RegistryError(f"Unknown extractor fields for {name}: {sorted(unknown)}")

    compiled: Dict[str, Tuple[FieldPattern, ...]] = {}
    for field_name, entries in extractors.items():
        chain: List[FieldPattern] = []
        for entry in entries:
            source, group = (entry, 1) if isinstance(entry, str) else entry
            pattern = _compile(source)
            if group > pattern.groups:
                raise RegistryError(
                    f"{name} {field_name} pattern has no capture group {group}: {source!r}"
                )
            chain.append(FieldPattern(pattern, group))
        compiled[field_name] = tuple(chain)

    return PlatformRule(
        name=name,
        sender_domains=tuple(domain.lower() for domain in sender_domains),
        content_signatures=tuple(_compile(signature) for signature in content_signatures),
        field_extractors=MappingProxyType(compiled),
    )


def _compile(source: str) -> "re.Pattern[str]":
    # Patterns starting with an inline flag group manage their own case sensitivity
    flags = 0 if source.startswith("(?") and not source.startswith("(?:") else re.IGNORECASE
    return re.compile(source, flags)


class PlatformRegistry:
    """
    Ordered, immutable collection of platform rules.

    Declaration order is significant: classification returns the first rule
    whose sender or content test succeeds.
    """

    def __init__(self, rules: Iterable[PlatformRule]):
        self._rules: Tuple[PlatformRule, ...] = tuple(rules)
        self._by_name: Mapping[str, PlatformRule] = MappingProxyType(
            {rule.name: rule for rule in self._rules}
        )
        if len(self._by_name) != len(self._rules):
            raise RegistryError("Platform names must be unique")

    def __iter__(self) -> Iterator[PlatformRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"PlatformRegistry({list(self.names)!r})"

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def get(self, name: Optional[str]) -> Optional[PlatformRule]:
        if name is None:
            return None
        return self._by_name.get(name)


# Shared label-style patterns found in confirmation templates
_COMPANY_AFTER_AT = r"\bat\s+([^.!\n]+?)(?:\.|!|\n|$)"
_COMPANY_LABEL = r"company:\s*([^.!\n]+)"
_LOCATION_LABEL = r"location:\s*([^.!\n]+)"
_TITLE_LABEL = r"job title:\s*([^.!\n]+)"


def build_default_registry() -> PlatformRegistry:
    """Rules for the job boards supported out of the box."""
    return PlatformRegistry([
        make_rule(
            "LinkedIn",
            sender_domains=["linkedin.com", "linkedin.email.com", "e.linkedin.com"],
            content_signatures=[
                r"linkedin",
                r"your application was sent",
                r"you applied to",
                r"application submitted.*linkedin",
            ],
            extractors={
                # "You applied to <title> at <company>"
                "title": [
                    r"you applied to\s+(.+?)\s+at\b",
                    r"application for\s+(.+?)\s+at\b",
                    r"applied for the\s+(.+?)\s+position",
                    r"for the\s+(.+?)\s+position",
                    _TITLE_LABEL,
                ],
                "company": [
                    _COMPANY_AFTER_AT,
                    r"position at\s+([^.!\n]+)",
                    _COMPANY_LABEL,
                ],
                "location": [
                    _LOCATION_LABEL,
                    # Case-sensitive: a capitalised place name after "in"
                    r"(?-i:\bin\s+([A-Z][a-z]+(?:,?\s*[A-Z]{2})?))",
                ],
            },
        ),
        make_rule(
            "Indeed",
            sender_domains=["indeed.com", "indeedemail.com", "indeed.email"],
            content_signatures=[
                r"indeed",
                r"you applied on indeed",
                r"application received",
                r"your indeed application",
            ],
            extractors={
                "title": [
                    r"applied for\s+(.+?)\s+at\b",
                    r"application for:\s*([^-\n]+)",
                    _TITLE_LABEL,
                ],
                "company": [
                    _COMPANY_AFTER_AT,
                    _COMPANY_LABEL,
                    r"employer:\s*([^.!\n]+)",
                ],
                "location": [
                    _LOCATION_LABEL,
                    r"job location:\s*([^.!\n]+)",
                ],
            },
        ),
        make_rule(
            "Glassdoor",
            sender_domains=["glassdoor.com", "glassdoor.email.com", "mail.glassdoor.com"],
            content_signatures=[
                r"glassdoor",
                r"application submitted via glassdoor",
                r"you applied through glassdoor",
            ],
            extractors={
                "title": [
                    r"applied for\s+(.+?)\s+at\b",
                    r"position:\s*([^.!\n]+)",
                    r"role:\s*([^.!\n]+)",
                    _TITLE_LABEL,
                ],
                "company": [
                    _COMPANY_AFTER_AT,
                    _COMPANY_LABEL,
                ],
                "location": [
                    _LOCATION_LABEL,
                ],
            },
        ),
        make_rule(
            "ZipRecruiter",
            sender_domains=["ziprecruiter.com", "mail.ziprecruiter.com"],
            content_signatures=[
                r"ziprecruiter",
                r"you applied via ziprecruiter",
            ],
            extractors={
                "title": [
                    r"applied for\s+(.+?)\s+at\b",
                    r"job:\s*([^.!\n]+)",
                    _TITLE_LABEL,
                ],
                "company": [
                    _COMPANY_AFTER_AT,
                    _COMPANY_LABEL,
                ],
                "location": [
                    _LOCATION_LABEL,
                ],
            },
        ),
    ])


@lru_cache(maxsize=1)
def default_registry() -> PlatformRegistry:
    """The default registry, built once per process."""
    return build_default_registry()
