#!/usr/bin/env python3
"""
Color space conversion between CIE LCH/LAB (D65) and 8-bit sRGB.

All array functions take and return arrays of shape (n, 3); a single color
of shape (3,) is accepted and treated as n = 1.
"""

import colorsys
import re

import numpy as np


class InvalidColorError(ValueError):
    """Raised when a color string cannot be parsed as hex RGB."""


# =============================================================================
# Constants
# =============================================================================

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

EPSILON = 0.008856
KAPPA = 903.3

# Tolerance for in-gamut checks on linear RGB (absorbs float noise)
GAMUT_TOLERANCE = 1e-6

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$')


def _as_rows(values) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    return arr


# =============================================================================
# LCH <-> LAB
# =============================================================================

def lch_to_lab(lch: np.ndarray) -> np.ndarray:
    """Convert LCH (hue in degrees) to LAB."""
    lch = _as_rows(lch)
    L, C, H = lch[:, 0], lch[:, 1], np.radians(lch[:, 2])
    return np.column_stack([L, C * np.cos(H), C * np.sin(H)])


def lab_to_lch(lab: np.ndarray) -> np.ndarray:
    """Convert LAB to LCH with hue normalized to [0, 360)."""
    lab = _as_rows(lab)
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]
    C = np.sqrt(a ** 2 + b ** 2)
    H = np.degrees(np.arctan2(b, a)) % 360
    return np.column_stack([L, C, H])


# =============================================================================
# LAB <-> RGB
# =============================================================================

def _lab_to_linear_rgb(lab: np.ndarray) -> np.ndarray:
    """LAB to unclipped linear sRGB (0-1 when in gamut)."""
    lab = _as_rows(lab)
    if not np.all(np.isfinite(lab)):
        raise ValueError(f"Cannot convert non-finite LAB values: {lab.tolist()}")

    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    # LAB to XYZ
    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx**3 > EPSILON, fx**3, (116 * fx - 16) / KAPPA)
    y = np.where(L > KAPPA * EPSILON, ((L + 16) / 116) ** 3, L / KAPPA)
    z = np.where(fz**3 > EPSILON, fz**3, (116 * fz - 16) / KAPPA)

    x = x * XN
    y = y * YN
    z = z * ZN

    # XYZ to linear RGB
    r = x * 3.2404542 - y * 1.5371385 - z * 0.4985314
    g = -x * 0.9692660 + y * 1.8760108 + z * 0.0415560
    b_out = x * 0.0556434 - y * 0.2040259 + z * 1.0572252

    return np.column_stack([r, g, b_out])


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """
    Convert LAB array to RGB (0-255).

    Colors outside the sRGB gamut are clipped per channel, so any finite LAB
    value yields a displayable color. Non-finite input raises ValueError.
    """
    rgb_linear = _lab_to_linear_rgb(lab)

    # Apply gamma correction
    mask = rgb_linear > 0.0031308
    rgb = np.where(mask, 1.055 * np.power(np.clip(rgb_linear, 0, None), 1/2.4) - 0.055, 12.92 * rgb_linear)

    return np.clip(np.round(rgb * 255), 0, 255).astype(np.uint8)


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert RGB array (0-255) to LAB color space."""
    rgb_norm = _as_rows(rgb) / 255.0

    # Apply gamma correction
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    # RGB to XYZ matrix
    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    x, y, z = x / XN, y / YN, z / ZN

    fx = np.where(x > EPSILON, np.cbrt(x), (KAPPA * x + 16) / 116)
    fy = np.where(y > EPSILON, np.cbrt(y), (KAPPA * y + 16) / 116)
    fz = np.where(z > EPSILON, np.cbrt(z), (KAPPA * z + 16) / 116)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b_val = 200 * (fy - fz)

    return np.column_stack([L, a, b_val])


def is_in_gamut(lab: np.ndarray) -> np.ndarray:
    """Per-row flag: True when the color is representable without clipping."""
    rgb_linear = _lab_to_linear_rgb(lab)
    inside = (rgb_linear >= -GAMUT_TOLERANCE) & (rgb_linear <= 1 + GAMUT_TOLERANCE)
    return inside.all(axis=1)


# =============================================================================
# Hex Encoding
# =============================================================================

def rgb_to_hex(rgb) -> str:
    """Encode a single RGB triple (0-255) as lowercase #rrggbb."""
    r, g, b = (int(v) for v in np.asarray(rgb).reshape(-1)[:3])
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> tuple:
    """
    Parse #rrggbb, rrggbb or #rgb into an (r, g, b) tuple.

    Raises InvalidColorError for anything else, including non-strings.
    """
    if not isinstance(value, str):
        raise InvalidColorError(f"Expected a hex color string, got {type(value).__name__}: {value!r}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {value!r} (expected #rrggbb or #rgb)")
    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def lab_to_hex(lab: np.ndarray) -> str:
    """Convert LAB to hex string."""
    return rgb_to_hex(lab_to_rgb(lab)[0])


def lch_to_hex(l: float, c: float, h: float) -> str:
    """Convert a single LCH triple to hex, clipping to the sRGB gamut."""
    return lab_to_hex(lch_to_lab([l, c, h]))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL (hue in degrees, s and l in 0-1) to hex."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360.0, l, s)
    return rgb_to_hex([round(r * 255), round(g * 255), round(b * 255)])
