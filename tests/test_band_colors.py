"""Tests for the score transform, band color synthesis and palettes."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

import band_colors
from band_colors import (
    FALLBACK_COLOR,
    LCH,
    NEUTRAL_SCORE,
    REFERENCE_SCORE,
    SAMPLE_SCORES,
    band_boost,
    band_color,
    band_lch,
    build_palette,
    clamp_score,
    color_info,
    reference_palette,
    s_curve,
    sample_range,
    synthesize,
    transform_score,
)
from color_space import hex_to_rgb, hsl_to_hex
from contrast import relative_luminance
from facets import FACET_ORDER, FACET_SPECS, Facet


class TestScoreTransform:
    """Tests for clamp/pow/S-curve."""

    def test_endpoints_are_fixed(self) -> None:
        assert transform_score(0.0) == 0.0
        assert transform_score(1.0) == 1.0

    def test_midpoint(self) -> None:
        """0.5 squares to 0.25, which the S-curve maps to 0.125."""
        assert transform_score(0.5) == pytest.approx(0.125)

    def test_s_curve_fixed_points(self) -> None:
        assert s_curve(0.0) == 0.0
        assert s_curve(0.5) == pytest.approx(0.5)
        assert s_curve(1.0) == 1.0
        assert s_curve(0.25) == pytest.approx(0.125)
        assert s_curve(0.75) == pytest.approx(0.875)

    @pytest.mark.parametrize(
        "score,expected",
        [(-3.0, 0.0), (-0.01, 0.0), (1.01, 1.0), (42.0, 1.0), (math.inf, 1.0), (-math.inf, 0.0), (math.nan, 0.0)],
    )
    def test_out_of_range_is_clamped(self, score: float, expected: float) -> None:
        """Scores outside [0, 1] are clamped, never rejected."""
        assert clamp_score(score) == expected
        assert transform_score(score) == expected

    def test_monotonic(self) -> None:
        scores = np.linspace(0, 1, 201)
        values = [transform_score(s) for s in scores]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_accepts_numpy_scalars(self) -> None:
        assert transform_score(np.float32(1.0)) == 1.0


class TestBandLch:
    """Tests for LCH synthesis before conversion."""

    def test_band_boost(self) -> None:
        assert band_boost(0) == 0.0
        assert band_boost(6) == pytest.approx(math.sin(4.2) * 4)

    def test_band_boosts_are_distinct(self) -> None:
        """Every spectrum position gets its own lightness offset."""
        boosts = [round(band_boost(i), 6) for i in range(7)]
        assert len(set(boosts)) == 7

    def test_ontology_minimum(self) -> None:
        """Index 0 has no boost, so score 0 sits on the range minimum."""
        assert band_lch(Facet.ONTOLOGY, 0.0) == LCH(25.0, 40.0, 305.0)

    def test_teleology_maximum(self) -> None:
        lch = band_lch(Facet.TELEOLOGY, 1.0)
        assert lch.l == pytest.approx(90 + math.sin(6 * 0.7) * 4)
        assert lch.c == pytest.approx(160)
        assert lch.h == 25

    @pytest.mark.parametrize("facet", list(Facet))
    def test_range_closure(self, facet: Facet, score_grid: list[float]) -> None:
        """L and C stay inside the facet's ranges (L shifted by boost, clamped)."""
        spec = FACET_SPECS[facet]
        boost = band_boost(spec.index)
        l_low = min(100.0, max(0.0, spec.lightness[0] + boost))
        l_high = min(100.0, spec.lightness[1] + boost)

        for score in score_grid:
            lch = band_lch(facet, score)
            assert 0.0 <= lch.l <= 100.0
            assert l_low - 1e-9 <= lch.l <= l_high + 1e-9
            assert spec.chroma[0] - 1e-9 <= lch.c <= spec.chroma[1] + 1e-9
            assert lch.h == spec.hue

    @pytest.mark.parametrize("facet", list(Facet))
    def test_monotonic_separation(self, facet: Facet) -> None:
        """Scores 0 and 1 differ by at least 50 combined L+C units."""
        low = band_lch(facet, 0.0)
        high = band_lch(facet, 1.0)
        assert (high.l - low.l) + (high.c - low.c) >= 50

    def test_unknown_facet(self) -> None:
        assert band_lch("Astrology", 0.5) is None


class TestBandColor:
    """Tests for the hex color synthesizer."""

    @pytest.mark.parametrize("facet", list(Facet))
    def test_deterministic(self, facet: Facet, score_grid: list[float], hex_pattern) -> None:
        for score in score_grid:
            first = band_color(facet, score)
            assert band_color(facet, score) == first
            assert hex_pattern.match(first)

    def test_synthesize_alias(self) -> None:
        assert synthesize is band_color

    def test_names_and_members_agree(self) -> None:
        assert band_color("teleology", 0.3) == band_color(Facet.TELEOLOGY, 0.3)

    def test_category_distinctness(self) -> None:
        """At a shared score every facet renders a different color."""
        colors = [band_color(facet, 0.6) for facet in FACET_ORDER]
        assert len(set(colors)) == len(colors)

    def test_out_of_range_scores_match_bounds(self) -> None:
        assert band_color(Facet.AXIOLOGY, -5) == band_color(Facet.AXIOLOGY, 0.0)
        assert band_color(Facet.AXIOLOGY, 5) == band_color(Facet.AXIOLOGY, 1.0)

    def test_teleology_extreme_contrast(self) -> None:
        """High Teleology is a bright red, low Teleology a deep one."""
        high_hex = band_color("Teleology", 1.0)
        low_hex = band_color("Teleology", 0.05)

        for r, g, b in (hex_to_rgb(high_hex), hex_to_rgb(low_hex)):
            assert r > g and r > b

        assert relative_luminance(high_hex) > relative_luminance(low_hex) * 3

        high = band_lch("Teleology", 1.0)
        low = band_lch("Teleology", 0.05)
        assert high.h == low.h == 25
        assert (high.l - low.l) + (high.c - low.c) >= 150

    def test_unknown_facet_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown facets render mid gray and log a warning."""
        with caplog.at_level(logging.WARNING, logger="band_colors"):
            assert band_color("Astrology", 0.9) == FALLBACK_COLOR
        assert "Astrology" in caplog.text

    def test_conversion_failure_falls_back_to_hsl(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A failed LCH conversion yields a plain color at the facet hue."""

        def broken(l: float, c: float, h: float) -> str:
            raise ValueError("conversion exploded")

        monkeypatch.setattr(band_colors, "lch_to_hex", broken)
        with caplog.at_level(logging.WARNING, logger="band_colors"):
            result = band_color(Facet.TELEOLOGY, 0.5)

        assert result == hsl_to_hex(25, 0.9, 0.5)
        assert "conversion exploded" in caplog.text

    def test_non_numeric_score_raises(self) -> None:
        with pytest.raises(TypeError):
            band_color(Facet.TELEOLOGY, None)


class TestBuildPalette:
    """Tests for build_palette."""

    def test_empty_input_is_complete(self) -> None:
        """Every facet is present, colored at the neutral score."""
        palette = build_palette([])
        assert list(palette) == list(FACET_ORDER)
        for facet, color in palette.items():
            assert color == band_color(facet, NEUTRAL_SCORE)

    def test_default_argument(self) -> None:
        assert build_palette() == build_palette([])

    def test_uses_given_scores(self) -> None:
        palette = build_palette([("Ontology", 0.9), (Facet.MYTHOLOGY, 0.1)])
        assert palette[Facet.ONTOLOGY] == band_color(Facet.ONTOLOGY, 0.9)
        assert palette[Facet.MYTHOLOGY] == band_color(Facet.MYTHOLOGY, 0.1)
        assert palette[Facet.AXIOLOGY] == band_color(Facet.AXIOLOGY, NEUTRAL_SCORE)

    def test_last_duplicate_wins(self) -> None:
        palette = build_palette([("Teleology", 0.1), ("Teleology", 0.9)])
        assert palette[Facet.TELEOLOGY] == band_color(Facet.TELEOLOGY, 0.9)

    def test_accepts_mapping(self) -> None:
        palette = build_palette({Facet.COSMOLOGY: 0.8})
        assert palette[Facet.COSMOLOGY] == band_color(Facet.COSMOLOGY, 0.8)

    def test_ignores_unknown_and_non_numeric(self) -> None:
        """Bad entries are skipped; the facet keeps the neutral score."""
        palette = build_palette([("Astrology", 1.0), ("Axiology", "high"), ("Praxeology", None)])
        assert len(palette) == 7
        assert palette[Facet.AXIOLOGY] == band_color(Facet.AXIOLOGY, NEUTRAL_SCORE)
        assert palette[Facet.PRAXEOLOGY] == band_color(Facet.PRAXEOLOGY, NEUTRAL_SCORE)

    def test_accepts_decimal_and_fraction(self) -> None:
        palette = build_palette([("Teleology", Decimal("1.0")), ("Ontology", Fraction(3, 4))])
        assert palette[Facet.TELEOLOGY] == band_color(Facet.TELEOLOGY, 1.0)
        assert palette[Facet.ONTOLOGY] == band_color(Facet.ONTOLOGY, 0.75)

    def test_skipped_score_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="band_colors"):
            palette = build_palette([("Cosmology", 1 + 2j), ("Mythology", True)])
        assert palette[Facet.COSMOLOGY] == band_color(Facet.COSMOLOGY, NEUTRAL_SCORE)
        assert palette[Facet.MYTHOLOGY] == band_color(Facet.MYTHOLOGY, NEUTRAL_SCORE)
        assert "(1+2j)" in caplog.text
        assert "True" in caplog.text

    def test_out_of_range_scores_are_clamped(self) -> None:
        palette = build_palette([("Epistemology", 3.5)])
        assert palette[Facet.EPISTEMOLOGY] == band_color(Facet.EPISTEMOLOGY, 1.0)

    def test_reference_palette(self) -> None:
        assert reference_palette() == build_palette([(f, REFERENCE_SCORE) for f in FACET_ORDER])


class TestDiagnostics:
    """Tests for sample_range and color_info."""

    @pytest.mark.parametrize("facet", list(Facet))
    def test_sample_range(self, facet: Facet, hex_pattern) -> None:
        samples = sample_range(facet)
        assert [score for score, _ in samples] == [0.0, 0.25, 0.5, 0.75, 1.0]
        assert tuple(score for score, _ in samples) == SAMPLE_SCORES
        for score, color in samples:
            assert hex_pattern.match(color)
            assert color == band_color(facet, score)

    def test_sample_range_unknown_facet(self) -> None:
        assert [color for _, color in sample_range("Astrology")] == [FALLBACK_COLOR] * 5

    def test_color_info_matches_rendered_color(self) -> None:
        """Reported LCH comes from the same transform as the hex."""
        info = color_info("Praxeology", 0.7)
        assert info.hex == band_color(Facet.PRAXEOLOGY, 0.7)
        assert info.lch == band_lch(Facet.PRAXEOLOGY, 0.7)
        assert info.score == 0.7

    def test_color_info_clamps_score(self) -> None:
        assert color_info(Facet.AXIOLOGY, 1.5).score == 1.0

    def test_color_info_unknown(self) -> None:
        assert color_info("Astrology", 0.5) is None
