#!/usr/bin/env python3
"""
WCAG contrast checks for text and icons drawn on top of band colors.
"""

from dataclasses import dataclass

from color_space import hex_to_rgb


# =============================================================================
# Constants
# =============================================================================

WHITE = "#ffffff"
BLACK = "#000000"

WCAG_AAA = 7.0
WCAG_AA = 4.5  # Normal-size text
WCAG_AA_LARGE = 3.0


@dataclass(frozen=True)
class ContrastResult:
    """Best overlay color for a background and how readable it is."""
    overlay_color: str  # WHITE or BLACK
    contrast_ratio: float
    is_accessible: bool
    level: str  # "AAA", "AA", "AA-large" or "fail"


def relative_luminance(color: str) -> float:
    """
    WCAG relative luminance of a hex color (0 = black, 1 = white).

    Raises InvalidColorError if the color is not valid hex.
    """
    def linearize(channel):
        c = channel / 255.0
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (linearize(v) for v in hex_to_rgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _ratio(l1: float, l2: float) -> float:
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two hex colors, from 1.0 to 21.0."""
    return _ratio(relative_luminance(color1), relative_luminance(color2))


def wcag_level(ratio: float) -> str:
    if ratio >= WCAG_AAA:
        return "AAA"
    elif ratio >= WCAG_AA:
        return "AA"
    elif ratio >= WCAG_AA_LARGE:
        return "AA-large"
    return "fail"


def validate_contrast(background: str) -> ContrastResult:
    """
    Pick white or black overlay text for a background color.

    Whichever gives the higher contrast ratio wins (white on a tie). Malformed
    colors raise InvalidColorError instead of defaulting, since a silent
    default could hide an unreadable combination.
    """
    luminance = relative_luminance(background)
    white_ratio = _ratio(luminance, 1.0)
    black_ratio = _ratio(luminance, 0.0)

    if white_ratio >= black_ratio:
        overlay, ratio = WHITE, white_ratio
    else:
        overlay, ratio = BLACK, black_ratio

    return ContrastResult(
        overlay_color=overlay,
        contrast_ratio=ratio,
        is_accessible=ratio >= WCAG_AA,
        level=wcag_level(ratio),
    )
