"""Framework-independent label measurement.

Labels are measured before layout so that alignment can compensate for their
width without a render pass.
"""

from collections.abc import Callable

# Measures a caption, returning (width, height) in pixels
Measure = Callable[[str], tuple[float, float]]

DEFAULT_FONT_SIZE = 14
DEFAULT_PADDING = 4


def estimate_label_size(
    caption: str,
    font_size: float = DEFAULT_FONT_SIZE,
    padding: float = DEFAULT_PADDING,
) -> tuple[float, float]:
    """Estimate the box size of a label.

    Uses an average glyph width of 0.6 em and a line height of 1.4 em, with
    padding on every side.

    Args:
        caption: Label text; surrounding whitespace is ignored.
        font_size: Font size in pixels.
        padding: Padding around the text in pixels.

    Returns:
        (width, height) in pixels.
    """
    text = caption.strip()
    char_width = font_size * 0.6
    text_width = len(text) * char_width
    text_height = font_size * 1.4
    return text_width + padding * 2, text_height + padding * 2


def make_measure(font_size: float = DEFAULT_FONT_SIZE, padding: float = DEFAULT_PADDING) -> Measure:
    """Return a Measure bound to a font size and padding."""

    def measure(caption: str) -> tuple[float, float]:
        return estimate_label_size(caption, font_size, padding)

    return measure
