"""Utility functions for the UI."""

from src.chains.spec_generator import BULLET, SpecificationResult
from src.ui.state import SpecField

GENERATE_LABEL = "Generate Specifications"
GENERATING_LABEL = "Generating..."

COPY_LABELS: dict[SpecField, tuple[str, str]] = {
    SpecField.ENGLISH: ("Copy", "Copied!"),
    SpecField.ARABIC: ("نسخ", "تم النسخ!"),
}

FIELD_HEADINGS = {
    SpecField.ENGLISH: "English:",
    SpecField.ARABIC: "Arabic:",
}

# Text direction per panel
FIELD_DIRECTIONS = {
    SpecField.ENGLISH: "ltr",
    SpecField.ARABIC: "rtl",
}


def generate_label(is_loading: bool) -> str:
    """Label of the generate button."""
    return GENERATING_LABEL if is_loading else GENERATE_LABEL


def copy_label(field: SpecField, copied: bool) -> str:
    """Label of a copy button, in the language of its panel.

    Args:
        field: Panel the button belongs to.
        copied: Whether the field was copied within the feedback window.

    Returns:
        The confirmation label if copied, the default label otherwise.
    """
    default, confirmation = COPY_LABELS[field]
    return confirmation if copied else default


def bullet_lines(text: str) -> list[str]:
    """Split specification text into its bullet lines.

    Blank lines are dropped; lines without the bullet glyph are kept as-is.

    Args:
        text: Specification text, one bullet per line.

    Returns:
        Non-empty lines, stripped of surrounding whitespace.
    """
    return [line.strip() for line in text.splitlines() if line.strip()]


def count_bullets(text: str) -> int:
    """Number of lines that start with the bullet glyph."""
    return sum(1 for line in bullet_lines(text) if line.startswith(BULLET))


def visible_panels(result: SpecificationResult) -> list[tuple[SpecField, str]]:
    """Panels to render for a result, skipping fields with empty text."""
    panels = [
        (SpecField.ENGLISH, result.english_specs),
        (SpecField.ARABIC, result.arabic_specs),
    ]
    return [(field, text) for field, text in panels if text]
