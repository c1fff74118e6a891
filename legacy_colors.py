#!/usr/bin/env python3
"""
Legacy three-tier band colors.

Before the LCH band engine, each facet had one fixed swatch that was darkened
for low scores and brightened for high ones. Saved results and older chart
components still ask for these colors, so the mapping is kept as-is.
"""

from types import MappingProxyType

import numpy as np

from color_space import hex_to_rgb, lab_to_hex, rgb_to_lab
from facets import Facet, parse_facet


# =============================================================================
# Constants
# =============================================================================

DOMAIN_COLORS = MappingProxyType({
    Facet.ONTOLOGY: "#e53935",      # red
    Facet.EPISTEMOLOGY: "#fb8c00",  # orange
    Facet.PRAXEOLOGY: "#fdd835",    # yellow
    Facet.AXIOLOGY: "#43a047",      # green
    Facet.MYTHOLOGY: "#1e88e5",     # blue
    Facet.COSMOLOGY: "#5e35b1",     # indigo
    Facet.TELEOLOGY: "#8e24aa",     # violet
})

LEGACY_FALLBACK_COLOR = "#bdbdbd"

LAB_STEP = 18  # LAB lightness units per darken/brighten step

LOW_THRESHOLD = 0.33
HIGH_THRESHOLD = 0.66
DARKEN_AMOUNT = 1.5
BRIGHTEN_AMOUNT = 1.0


def shift_lightness(color: str, amount: float) -> str:
    """Shift a hex color's LAB lightness by amount * LAB_STEP (negative darkens)."""
    lab = rgb_to_lab(np.array(hex_to_rgb(color)))
    lab[:, 0] = np.clip(lab[:, 0] + amount * LAB_STEP, 0, 100)
    return lab_to_hex(lab)


def legacy_band_color(facet, score: float) -> str:
    """Fixed swatch for the facet, darkened below 0.33 and brightened above 0.66."""
    base = DOMAIN_COLORS.get(parse_facet(facet), LEGACY_FALLBACK_COLOR)

    if score <= LOW_THRESHOLD:
        return shift_lightness(base, -DARKEN_AMOUNT)
    elif score <= HIGH_THRESHOLD:
        return base
    return shift_lightness(base, BRIGHTEN_AMOUNT)
