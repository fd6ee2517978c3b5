"""YAML/dict config loader for entity-extractor.

Supports loading from a YAML file or a plain dict (nested under an
"entity_extractor" key or flat).

Example YAML:

    entity_extractor:
      input_path: input.txt
      indent: 4
      log_level: WARNING

The category set is fixed and cannot be configured.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any


DEFAULT_INPUT = "input.txt"
DEFAULT_INDENT = 4
DEFAULT_LOG_LEVEL = "WARNING"


def load_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    data = data or {}
    # Support nested under "entity_extractor" key or flat
    if "entity_extractor" in data:
        data = data["entity_extractor"] or {}

    indent = data.get("indent", DEFAULT_INDENT)
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ValueError(f"indent must be a non-negative integer, got {indent!r}")

    return {
        "input_path": str(data.get(
            "input_path",
            os.environ.get("ENTITY_EXTRACTOR_INPUT", DEFAULT_INPUT),
        )),
        "indent": indent,
        "log_level": str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    with open(path) as f:
        return load_config(yaml.safe_load(f))
