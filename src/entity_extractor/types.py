"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field

# Fixed category set, in output order
CATEGORIES: tuple[str, ...] = (
    "emails",
    "urls",
    "phonenumbers",
    "hashtags",
    "currencyamounts",
)


@dataclass(frozen=True, slots=True)
class EntityMatch:
    """A single extracted entity."""
    category: str          # one of CATEGORIES
    start: int
    end: int
    text: str              # raw substring of the document
    value: str             # what ends up in the result (masked for emails)


@dataclass(slots=True)
class ExtractionResult:
    """Categorized matches for one document, in first-occurrence order."""
    emails: list[str] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)
    phonenumbers: list[str] = field(default_factory=list)
    hashtags: list[str] = field(default_factory=list)
    currencyamounts: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(getattr(self, name)) for name in CATEGORIES}
