# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
hsluvkit -- HSLuv and HPLuv color conversions.

Converts between sRGB, CIE XYZ, CIE LUV, LCH, HSLuv and HPLuv, plus
``#rrggbb`` hex strings. HSLuv saturation is measured against the largest
in-gamut chroma for the exact hue and lightness; HPLuv against the largest
chroma that is in gamut for every hue.

Quick start::

    from hsluvkit import HSLuv, RGB, hsluv_to_rgb, rgb_to_hsluv

    rgb = hsluv_to_rgb(HSLuv(h=250.0, s=80.0, l=60.0))
    rgb.to_hex().string       # "#..."
    rgb_to_hsluv(RGB(1.0, 0.0, 0.0))
"""

from __future__ import annotations

__version__ = "1.0.0"

from hsluvkit.convert import (
    hex_to_hpluv,
    hex_to_hsluv,
    hpluv_to_hex,
    hpluv_to_rgb,
    hsluv_to_hex,
    hsluv_to_rgb,
    rgb_to_hpluv,
    rgb_to_hsluv,
)
from hsluvkit.errors import HexParseError, HSLuvError, RGBRangeError, SnapshotError
from hsluvkit.schema import HPLuv, HSLuv, Hex, LCH, LUV, RGB, XYZ

__all__ = [
    # Core API
    "hsluv_to_rgb",
    "hpluv_to_rgb",
    "rgb_to_hsluv",
    "rgb_to_hpluv",
    "hsluv_to_hex",
    "hpluv_to_hex",
    "hex_to_hsluv",
    "hex_to_hpluv",
    # Types
    "RGB",
    "XYZ",
    "LUV",
    "LCH",
    "HSLuv",
    "HPLuv",
    "Hex",
    # Errors
    "HSLuvError",
    "HexParseError",
    "RGBRangeError",
    "SnapshotError",
    # Version
    "__version__",
]
