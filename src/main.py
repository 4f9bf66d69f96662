"""Command-line entry point for one-shot specification generation."""

import argparse
import asyncio
import logging
import sys

from src.chains.spec_generator import SpecGeneratorChain
from src.config import get_settings
from src.ui.clipboard import InMemoryClipboard
from src.ui.controller import UIController
from src.ui.state import SpecField
from src.ui.utils import FIELD_HEADINGS, count_bullets

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate English and Arabic product specifications from a description"
    )
    parser.add_argument(
        "-d",
        "--description",
        type=str,
        default=None,
        help="Product description (read from stdin if not specified)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main function for the specification generation CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    description = args.description if args.description is not None else sys.stdin.read()

    controller = UIController(generator=SpecGeneratorChain(), clipboard=InMemoryClipboard())
    controller.set_description(description)
    asyncio.run(controller.generate())

    result = controller.result
    if result is None:
        logger.error(f"Generation failed: {controller.error_message}")
        return 1

    for field, text in (
        (SpecField.ENGLISH, result.english_specs),
        (SpecField.ARABIC, result.arabic_specs),
    ):
        logger.info(f"{FIELD_HEADINGS[field]} {count_bullets(text)} bullet points")
        print(FIELD_HEADINGS[field])
        print(text)
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
