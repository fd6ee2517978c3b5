"""CLI interface for entity-extractor.

Usage:
    # Extract from ./input.txt and print JSON to stdout
    entity-extractor

    # Explicit input file, YAML config, compact output
    python -m entity_extractor notes.txt --config extractor.yaml --indent 2

A missing, unreadable or empty input prints nothing and exits 0.
"""

from __future__ import annotations
import argparse
import logging
import sys

from .config import load_config, load_from_yaml
from .extractor import Extractor
from .fileio import read_input, render

logger = logging.getLogger(__name__)


def _build_settings(args: argparse.Namespace) -> dict:
    cfg = load_from_yaml(args.config) if args.config else load_config({})
    if args.input is not None:
        cfg["input_path"] = args.input
    if args.indent is not None:
        cfg["indent"] = args.indent
    if args.log_level is not None:
        cfg["log_level"] = args.log_level.upper()
    return cfg


def run(settings: dict) -> int:
    """Read, extract and print.  Returns the process exit status."""
    text = read_input(settings["input_path"])
    if not text:
        logger.info("Nothing to extract from %s", settings["input_path"])
        return 0

    result = Extractor().extract(text)
    sys.stdout.write(render(result, indent=settings["indent"]))
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="entity-extractor",
        description="Extract emails, URLs, phone numbers, hashtags and currency amounts from text",
    )
    parser.add_argument("input", nargs="?", default=None, help="Input text file (default: input.txt)")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--indent", type=int, default=None, help="JSON indent (default: 4)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")

    args = parser.parse_args(argv)
    settings = _build_settings(args)

    logging.basicConfig(
        level=getattr(logging, settings["log_level"], logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
