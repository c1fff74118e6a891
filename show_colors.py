#!/usr/bin/env python3
"""
Facet band color report.

Prints the tuning table, colors for a set of score scenarios, the high/low
separation per facet and the score transform curve. Optionally writes an
HTML swatch page and a PNG swatch sheet for eyeballing the palette.
"""

import argparse
import math
import sys
from dataclasses import dataclass
from html import escape
from pathlib import Path

from PIL import Image, ImageDraw

from band_colors import (
    SAMPLE_SCORES, band_color, band_lch, enhance_score, reference_palette,
    s_curve, sample_range, transform_score,
)
from color_space import hex_to_rgb
from contrast import validate_contrast
from facets import FACET_ORDER, FACET_SPECS


# =============================================================================
# Constants
# =============================================================================

# One score per facet, in spectrum order
SCENARIOS = {
    'Extreme high': (0.95, 0.98, 1.0, 0.92, 0.97, 0.94, 0.99),
    'High': (0.7, 0.75, 0.8, 0.85, 0.9, 0.95, 1.0),
    'Medium': (0.4, 0.45, 0.5, 0.55, 0.6, 0.65, 0.7),
    'Low': (0.1, 0.15, 0.2, 0.25, 0.3, 0.35, 0.4),
    'Extreme low': (0.02, 0.05, 0.08, 0.03, 0.07, 0.04, 0.06),
    'Mixed': (0.95, 0.1, 0.8, 0.2, 0.9, 0.15, 0.85),
}

HIGH_SCORE = 1.0
LOW_SCORE = 0.05
EXTREME_SEPARATION = 80
HIGH_SEPARATION = 50

TRANSFORM_STEPS = [i / 10 for i in range(11)]


@dataclass
class Separation:
    """Lightness/chroma spread between a facet's high and low colors."""
    facet: str
    high: tuple  # (L, C)
    low: tuple  # (L, C)
    delta_l: float
    delta_c: float
    distance: float
    grade: str


# =============================================================================
# Tables
# =============================================================================

def range_table() -> list[str]:
    lines = []
    for facet in FACET_ORDER:
        spec = FACET_SPECS[facet]
        (l_min, l_max), (c_min, c_max) = spec.lightness, spec.chroma
        lines.append(f"{facet.value:<12} H={spec.hue:>3}  "
                     f"L={l_min}-{l_max} ({l_max - l_min}pt)  "
                     f"C={c_min}-{c_max} ({c_max - c_min}pt)")
    return lines


def scenario_table(scores) -> list[str]:
    """One row per facet for a scenario of seven scores."""
    lines = [f"{'Facet':<12} | Score | Color   |     L |     C |   H"]
    for facet, score in zip(FACET_ORDER, scores):
        lch = band_lch(facet, score)
        lines.append(f"{facet.value:<12} | {score * 100:4.0f}% | {band_color(facet, score)} | "
                     f"{lch.l:5.1f} | {lch.c:5.1f} | {lch.h:3.0f}")
    return lines


def separation(facet) -> Separation:
    high = band_lch(facet, HIGH_SCORE)
    low = band_lch(facet, LOW_SCORE)
    delta_l = abs(high.l - low.l)
    delta_c = abs(high.c - low.c)
    distance = math.hypot(delta_l, delta_c)

    if distance >= EXTREME_SEPARATION:
        grade = 'extreme'
    elif distance >= HIGH_SEPARATION:
        grade = 'high'
    else:
        grade = 'low'

    return Separation(
        facet=facet.value,
        high=(high.l, high.c),
        low=(low.l, low.c),
        delta_l=delta_l,
        delta_c=delta_c,
        distance=distance,
        grade=grade,
    )


def separation_table() -> list[str]:
    lines = [f"{'Facet':<12} | High L/C  | Low L/C   |   ΔL   |   ΔC   | Distance"]
    for facet in FACET_ORDER:
        sep = separation(facet)
        lines.append(f"{sep.facet:<12} | {sep.high[0]:3.0f}/{sep.high[1]:<5.0f} | {sep.low[0]:3.0f}/{sep.low[1]:<5.0f} | "
                     f"{sep.delta_l:6.1f} | {sep.delta_c:6.1f} | {sep.distance:6.1f} ({sep.grade})")
    return lines


def transform_table() -> list[str]:
    lines = ["Score | pow(2) | S-curve"]
    for score in TRANSFORM_STEPS:
        enhanced = enhance_score(score)
        lines.append(f"{score:5.1f} | {enhanced:6.3f} | {s_curve(enhanced):7.3f}")
    return lines


# =============================================================================
# Render
# =============================================================================

def render_report(scenarios=None) -> str:
    """Render the full report as plain text."""
    scenarios = SCENARIOS if scenarios is None else scenarios
    lines = ["FACET TUNING:", ""]
    lines.extend(range_table())
    lines.append("")

    lines.append("SCENARIOS:")
    for name, scores in scenarios.items():
        lines.append("")
        lines.append(f"{name}:")
        lines.extend(scenario_table(scores))
    lines.append("")

    lines.append(f"SEPARATION (score {HIGH_SCORE} vs {LOW_SCORE}):")
    lines.append("")
    lines.extend(separation_table())
    lines.append("")

    lines.append("SCORE TRANSFORM:")
    lines.append("")
    lines.extend(transform_table())

    return "\n".join(lines)


def render_html() -> str:
    """Render sample sweeps and reference colors as a standalone HTML page."""
    css = """
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: system-ui, -apple-system, sans-serif;
            background: #f5f5f5;
            color: #333;
            line-height: 1.5;
            padding: 2rem;
            max-width: 900px;
            margin: 0 auto;
        }
        h1 { font-size: 1.5rem; margin-bottom: 0.5rem; }
        h2 { font-size: 1.2rem; margin: 2rem 0 1rem; border-bottom: 1px solid #ddd; padding-bottom: 0.5rem; }
        .meta { color: #666; font-size: 0.9rem; margin-bottom: 1rem; }
        .palette-strip {
            display: flex;
            height: 80px;
            border-radius: 8px;
            overflow: hidden;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
            margin: 1.5rem 0;
        }
        .swatch {
            flex: 1;
            display: flex;
            align-items: flex-end;
            justify-content: center;
            padding: 0.5rem;
            font-size: 0.7rem;
            font-weight: 500;
        }
        .facet-row { display: grid; grid-template-columns: 120px 1fr; gap: 1rem; margin-bottom: 0.75rem; }
        .facet-row .name { font-weight: 600; align-self: center; }
        .facet-row .palette-strip { height: 56px; margin: 0; }
        .contrast-badge {
            display: block;
            font-size: 0.6rem;
            opacity: 0.85;
        }
    """

    lines = [
        '<!DOCTYPE html>',
        '<html lang="en">',
        '<head>',
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        '  <title>Facet band colors</title>',
        f'  <style>{css}</style>',
        '</head>',
        '<body>',
        '<h1>Facet band colors</h1>',
        f'<p class="meta">Sample scores: {", ".join(f"{s:.2f}" for s in SAMPLE_SCORES)}</p>',
    ]

    lines.append('<h2>Reference</h2>')
    lines.append('<div class="palette-strip">')
    for facet, hex_val in reference_palette().items():
        overlay = validate_contrast(hex_val).overlay_color
        lines.append(f'  <div class="swatch" style="background:{hex_val}; color:{overlay}">{escape(facet.value)}</div>')
    lines.append('</div>')

    lines.append('<h2>Score sweeps</h2>')
    for facet in FACET_ORDER:
        lines.append('<div class="facet-row">')
        lines.append(f'  <div class="name">{escape(facet.value)}</div>')
        lines.append('  <div class="palette-strip">')
        for score, hex_val in sample_range(facet):
            result = validate_contrast(hex_val)
            lines.append(f'    <div class="swatch" style="background:{hex_val}; color:{result.overlay_color}">'
                         f'{hex_val}<span class="contrast-badge">{result.contrast_ratio:.1f}:1 {result.level}</span></div>')
        lines.append('  </div>')
        lines.append('</div>')

    lines.append('</body>')
    lines.append('</html>')

    return '\n'.join(lines)


def render_swatches(output_path: str) -> None:
    """Save a PNG grid: one row per facet, one swatch per sample score."""
    swatch_size = 80
    padding = 10
    label_width = 100
    text_height = 20

    cols = len(SAMPLE_SCORES)
    img_width = label_width + cols * (swatch_size + padding) + padding
    img_height = text_height + len(FACET_ORDER) * (swatch_size + padding) + padding

    img = Image.new('RGB', (img_width, img_height), (240, 240, 240))
    draw = ImageDraw.Draw(img)

    for col, score in enumerate(SAMPLE_SCORES):
        x = label_width + col * (swatch_size + padding)
        draw.text((x + swatch_size // 2 - 10, 4), f"{score:.2f}", fill=(0, 0, 0))

    for row, facet in enumerate(FACET_ORDER):
        y = text_height + row * (swatch_size + padding)
        draw.text((padding, y + swatch_size // 2 - 5), facet.value, fill=(0, 0, 0))

        for col, (score, hex_val) in enumerate(sample_range(facet)):
            x = label_width + col * (swatch_size + padding)
            draw.rectangle([x, y, x + swatch_size, y + swatch_size], fill=hex_to_rgb(hex_val))

            overlay = hex_to_rgb(validate_contrast(hex_val).overlay_color)
            draw.text((x + 6, y + swatch_size - 16), hex_val, fill=overlay)

    img.save(output_path)


# =============================================================================
# CLI
# =============================================================================

def parse_scores(value: str) -> tuple:
    """Parse seven comma-separated scores (argparse type)."""
    try:
        scores = tuple(float(part) for part in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"scores must be numbers: {value!r}")
    if len(scores) != len(FACET_ORDER):
        raise argparse.ArgumentTypeError(
            f"expected {len(FACET_ORDER)} scores (one per facet), got {len(scores)}"
        )
    return scores


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Show facet band colors across score scenarios.'
    )
    parser.add_argument(
        '--scores', '-s',
        type=parse_scores,
        help='Seven comma-separated scores, Ontology to Teleology, shown as a custom scenario'
    )
    parser.add_argument(
        '--html',
        help='Write an HTML swatch page to this path'
    )
    parser.add_argument(
        '--png',
        help='Write a PNG swatch sheet to this path'
    )

    args = parser.parse_args(argv)

    scenarios = dict(SCENARIOS)
    if args.scores:
        scenarios['Custom'] = args.scores

    print(render_report(scenarios))

    try:
        if args.html:
            output_path = Path(args.html)
            output_path.write_text(render_html())
            print(f"\nWrote: {output_path}")
        if args.png:
            render_swatches(args.png)
            print(f"\nWrote: {args.png}")
    except (OSError, ValueError) as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
