"""Input source and output sink around the extractor."""

from __future__ import annotations
import json
import logging
from pathlib import Path

from .types import ExtractionResult

logger = logging.getLogger(__name__)


def read_input(path: str | Path) -> str:
    """Read a UTF-8 text file.  Returns "" if it cannot be read.

    Invalid bytes are decoded as U+FFFD rather than failing the read.
    """
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as e:
        logger.error("Error: %s not found: %s", path, e)
        return ""
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        return ""


def render(result: ExtractionResult, *, indent: int = 4) -> str:
    """Render a result as indented JSON, keys in category order."""
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)
