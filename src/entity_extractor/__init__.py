"""Entity Extractor — regex extraction of emails, URLs, phones, hashtags and amounts."""

from .extractor import Extractor, extract
from .fileio import read_input, render
from .config import load_config, load_from_yaml
from .types import CATEGORIES, EntityMatch, ExtractionResult

__all__ = [
    "Extractor", "extract",
    "read_input", "render",
    "load_config", "load_from_yaml",
    "CATEGORIES", "EntityMatch", "ExtractionResult",
]
__version__ = "0.1.0"
