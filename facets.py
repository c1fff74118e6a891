#!/usr/bin/env python3
"""
Facet table: the seven assessment facets and their band color tuning.

Facets are laid out as a violet → red spectrum. Each facet owns a fixed hue
and a (lightness, chroma) range that the band color engine interpolates
across according to the facet score.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class Facet(Enum):
    """Assessment facets, in spectrum order."""
    ONTOLOGY = "Ontology"
    EPISTEMOLOGY = "Epistemology"
    PRAXEOLOGY = "Praxeology"
    AXIOLOGY = "Axiology"
    MYTHOLOGY = "Mythology"
    COSMOLOGY = "Cosmology"
    TELEOLOGY = "Teleology"


@dataclass(frozen=True)
class FacetSpec:
    """Band tuning for a single facet."""
    hue: float  # LCH hue angle in degrees
    lightness: tuple[float, float]  # (min, max) in [0, 100]
    chroma: tuple[float, float]  # (min, max), may exceed the sRGB gamut
    index: int  # Position in the spectrum, drives the band contrast boost


# =============================================================================
# Constants
# =============================================================================

FACET_ORDER = tuple(Facet)

# Wide lightness ranges (up to 70 points) on violet/indigo/blue/orange/red
# for maximum contrast. Green and yellow stay bright to keep a natural look.
FACET_SPECS = MappingProxyType({
    Facet.ONTOLOGY:     FacetSpec(hue=305, lightness=(25, 95), chroma=(40, 140), index=0),  # violet
    Facet.EPISTEMOLOGY: FacetSpec(hue=275, lightness=(25, 95), chroma=(40, 140), index=1),  # indigo
    Facet.PRAXEOLOGY:   FacetSpec(hue=250, lightness=(25, 95), chroma=(40, 140), index=2),  # blue
    Facet.AXIOLOGY:     FacetSpec(hue=145, lightness=(45, 99), chroma=(25, 95), index=3),   # green
    Facet.MYTHOLOGY:    FacetSpec(hue=100, lightness=(65, 99), chroma=(25, 90), index=4),   # yellow
    Facet.COSMOLOGY:    FacetSpec(hue=55, lightness=(30, 98), chroma=(45, 150), index=5),   # orange
    Facet.TELEOLOGY:    FacetSpec(hue=25, lightness=(20, 90), chroma=(50, 160), index=6),   # red
})

_BY_NAME = MappingProxyType({facet.value.lower(): facet for facet in Facet})


# =============================================================================
# Lookup
# =============================================================================

def parse_facet(name) -> Optional[Facet]:
    """Resolve a Facet member or facet name (case-insensitive).

    Returns None for anything unrecognized; rendering code treats that as
    "use the fallback color" rather than an error.
    """
    if isinstance(name, Facet):
        return name
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name.strip().lower())


def get_facet_spec(name) -> Optional[FacetSpec]:
    """Return the band tuning for a facet, or None if it is not known."""
    facet = parse_facet(name)
    if facet is None:
        return None
    return FACET_SPECS[facet]


# =============================================================================
# Spectrum Navigation
# =============================================================================

def _require(name) -> Facet:
    facet = parse_facet(name)
    if facet is None:
        raise ValueError(f"Unknown facet: {name!r}")
    return facet


def next_facet(name) -> Facet:
    """Next facet in the spectrum, wrapping from red back to violet."""
    facet = _require(name)
    return FACET_ORDER[(FACET_ORDER.index(facet) + 1) % len(FACET_ORDER)]


def previous_facet(name) -> Facet:
    """Previous facet in the spectrum, wrapping from violet back to red."""
    facet = _require(name)
    return FACET_ORDER[(FACET_ORDER.index(facet) - 1) % len(FACET_ORDER)]


def are_adjacent(name1, name2) -> bool:
    """Whether two facets are neighbours on the (circular) spectrum."""
    diff = abs(FACET_ORDER.index(_require(name1)) - FACET_ORDER.index(_require(name2)))
    return diff == 1 or diff == len(FACET_ORDER) - 1


def facet_range(start, end) -> list[Facet]:
    """
    Facets from start to end inclusive, walking forward along the spectrum.

    If start comes after end, the walk wraps past Teleology back to Ontology.
    """
    start_idx = FACET_ORDER.index(_require(start))
    end_idx = FACET_ORDER.index(_require(end))
    if start_idx <= end_idx:
        return list(FACET_ORDER[start_idx:end_idx + 1])
    return list(FACET_ORDER[start_idx:]) + list(FACET_ORDER[:end_idx + 1])
