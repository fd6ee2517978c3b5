"""Extractor — the main API.  Regex scan, then per-category post-processing.

Usage:
    from entity_extractor import Extractor

    extractor = Extractor()      # stateless, reusable, reentrant

    result = extractor.extract("Mail john@acme.com, see #launch")
    print(result.emails)         # ["j***n@acme.com"]
    print(result.hashtags)       # ["#launch"]
"""

from __future__ import annotations
import logging

from .types import CATEGORIES, EntityMatch, ExtractionResult
from .patterns import scan_regex
from .sanitize import has_consecutive_dots, is_safe_url, mask_email

logger = logging.getLogger(__name__)


class Extractor:
    """Extracts emails, URLs, phone numbers, hashtags and currency amounts.

    Each category is scanned independently over the whole document, so the
    same characters may show up in more than one category.
    """

    def scan(self, text: str) -> list[EntityMatch]:
        """Return post-processed matches, with offsets into text."""
        out: list[EntityMatch] = []
        for m in scan_regex(text):
            if m.category == "emails":
                if has_consecutive_dots(m.text):
                    continue
                m = EntityMatch(
                    category=m.category,
                    start=m.start,
                    end=m.end,
                    text=m.text,
                    value=mask_email(m.text),
                )
            elif m.category == "urls" and not is_safe_url(m.text):
                logger.debug("Dropped unsafe URL at offset %d", m.start)
                continue
            out.append(m)
        return out

    def extract(self, text: str) -> ExtractionResult:
        """Extract all categories from text.  Never raises for str input."""
        grouped: dict[str, list[str]] = {name: [] for name in CATEGORIES}
        for m in self.scan(text):
            grouped[m.category].append(m.value)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Extracted %s",
                ", ".join(f"{name}={len(values)}" for name, values in grouped.items()),
            )
        return ExtractionResult(**grouped)


def extract(text: str) -> ExtractionResult:
    """Extract all categories from text (convenience)."""
    return Extractor().extract(text)
