#!/usr/bin/env python3
"""
Facet band colors: map a facet score to a vivid, high-contrast hex color.

Pipeline per facet:  score → clamp → pow(2.0) → S-curve → intensity
intensity → lightness/chroma within the facet's tuned ranges → band boost
LCH → sRGB (gamut clipped) → #rrggbb

Everything here is a pure function over the constant facet table, so results
are deterministic and safe to call from any thread.
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Number
from typing import Optional

from color_space import hsl_to_hex, lch_to_hex
from facets import FACET_ORDER, FACET_SPECS, Facet, parse_facet

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

SCORE_EXPONENT = 2.0  # Compresses low scores, spreads high scores apart
BAND_STEP = 0.7  # Radians per spectrum position for the band boost
BAND_BOOST = 4.0  # Peak lightness offset between bands (L units)

NEUTRAL_SCORE = 0.5  # Used for facets missing from a palette request
REFERENCE_SCORE = 0.6  # Score for the representative per-facet colors
SAMPLE_SCORES = (0.0, 0.25, 0.5, 0.75, 1.0)

FALLBACK_COLOR = "#6b7280"  # Mid gray for unknown facets
FALLBACK_SATURATION = 0.9
FALLBACK_LIGHTNESS = 0.5


@dataclass(frozen=True)
class LCH:
    """A color in CIE LCH: lightness 0-100, chroma >= 0, hue in degrees."""
    l: float
    c: float
    h: float


@dataclass(frozen=True)
class BandColorInfo:
    """Rendered color for a facet score, with the LCH it was built from."""
    hex: str
    lch: LCH
    score: float  # Clamped input score


# =============================================================================
# Score Transform
# =============================================================================

def clamp_score(score: float) -> float:
    """Clamp to [0, 1]. NaN is treated as the lowest score."""
    score = float(score)
    if math.isnan(score):
        return 0.0
    return max(0.0, min(1.0, score))


def enhance_score(x: float) -> float:
    return x ** SCORE_EXPONENT


def s_curve(x: float) -> float:
    """Quadratic ease-in/ease-out on [0, 1]; fixes 0, 0.5 and 1."""
    if x < 0.5:
        return 2 * x * x
    return 1 - 2 * (1 - x) * (1 - x)


def transform_score(score: float) -> float:
    """Map a raw score to band intensity in [0, 1]. Monotonic."""
    return s_curve(enhance_score(clamp_score(score)))


# =============================================================================
# Color Synthesis
# =============================================================================

def band_boost(index: int) -> float:
    """Lightness offset for a spectrum position, so equal scores still differ."""
    return math.sin(index * BAND_STEP) * BAND_BOOST


def band_lch(facet, score: float) -> Optional[LCH]:
    """
    Compute the LCH color for a facet score before conversion to RGB.

    Returns None if the facet is not recognized.
    """
    facet = parse_facet(facet)
    if facet is None:
        return None
    spec = FACET_SPECS[facet]

    intensity = transform_score(score)
    l_min, l_max = spec.lightness
    c_min, c_max = spec.chroma
    lightness = l_min + intensity * (l_max - l_min)
    chroma = c_min + intensity * (c_max - c_min)

    final_lightness = max(0.0, min(100.0, lightness + band_boost(spec.index)))
    return LCH(final_lightness, chroma, float(spec.hue))


def band_color(facet, score: float) -> str:
    """
    Hex color for a facet score.

    Never raises for any real score: unknown facets get FALLBACK_COLOR, and a
    failed LCH conversion falls back to a plain HSL color at the facet's hue.
    Non-numeric scores such as None raise TypeError.
    """
    lch = band_lch(facet, score)
    if lch is None:
        logger.warning("No band tuning for facet %r, using fallback color", facet)
        return FALLBACK_COLOR

    try:
        return lch_to_hex(lch.l, lch.c, lch.h)
    except ValueError as e:
        logger.warning("LCH conversion failed for %s (%s), using HSL fallback", facet, e)
        return hsl_to_hex(lch.h, FALLBACK_SATURATION, FALLBACK_LIGHTNESS)


synthesize = band_color


def color_info(facet, score: float) -> Optional[BandColorInfo]:
    """
    Rendered color plus the LCH values behind it, for tooltips and debugging.

    Uses the same transform as band_color so the reported L/C always match
    the hex. Returns None for an unknown facet.
    """
    lch = band_lch(facet, score)
    if lch is None:
        return None
    return BandColorInfo(hex=band_color(facet, score), lch=lch, score=clamp_score(score))


# =============================================================================
# Palettes
# =============================================================================

def _iter_scores(scores):
    if isinstance(scores, Mapping):
        return scores.items()
    return scores


def build_palette(scores=()) -> dict:
    """
    Color every facet from a set of (facet, score) pairs.

    Args:
        scores: Iterable of (facet, score) pairs, or a mapping facet → score.
            Facets are Facet members or names. When a facet appears more
            than once the last score wins. Unknown facets and non-numeric
            scores are ignored. Decimal and Fraction scores are accepted.

    Returns:
        dict of Facet → hex for all seven facets, in spectrum order.
        Facets without a score use NEUTRAL_SCORE.
    """
    by_facet = {}
    for name, score in _iter_scores(scores):
        facet = parse_facet(name)
        if facet is None:
            logger.debug("Ignoring score for unknown facet %r", name)
            continue
        if isinstance(score, (bool, complex)) or not isinstance(score, Number):
            logger.warning("Ignoring non-numeric score %r for %s", score, facet.value)
            continue
        by_facet[facet] = score

    return {
        facet: band_color(facet, by_facet.get(facet, NEUTRAL_SCORE))
        for facet in FACET_ORDER
    }


def reference_palette() -> dict:
    """Representative color per facet at REFERENCE_SCORE."""
    return {facet: band_color(facet, REFERENCE_SCORE) for facet in FACET_ORDER}


# =============================================================================
# Diagnostics
# =============================================================================

def sample_range(facet) -> list[tuple[float, str]]:
    """Colors for a facet at each of SAMPLE_SCORES."""
    return [(score, band_color(facet, score)) for score in SAMPLE_SCORES]
