# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Conversion core for hsluvkit.

Pure, closed-form functions over immutable color values. Scalar
conversions live in ``pairwise`` and ``pipeline``; ``batch`` mirrors them
over NumPy arrays.
"""

from hsluvkit.convert.gamut import get_bounds, max_chroma, max_pastel_chroma
from hsluvkit.convert.pairwise import (
    hex_to_rgb,
    hpluv_to_lch,
    hsluv_to_lch,
    lch_to_hpluv,
    lch_to_hsluv,
    lch_to_luv,
    luv_to_lch,
    luv_to_xyz,
    rgb_to_hex,
    rgb_to_xyz,
    xyz_to_luv,
    xyz_to_rgb,
)
from hsluvkit.convert.pipeline import (
    hex_to_hpluv,
    hex_to_hsluv,
    hpluv_to_hex,
    hpluv_to_rgb,
    hsluv_to_hex,
    hsluv_to_rgb,
    rgb_to_hpluv,
    rgb_to_hsluv,
)

__all__ = [
    # Pipelines
    "hsluv_to_rgb",
    "hpluv_to_rgb",
    "rgb_to_hsluv",
    "rgb_to_hpluv",
    "hsluv_to_hex",
    "hpluv_to_hex",
    "hex_to_hsluv",
    "hex_to_hpluv",
    # Pairwise steps
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_luv",
    "luv_to_xyz",
    "luv_to_lch",
    "lch_to_luv",
    "lch_to_hsluv",
    "hsluv_to_lch",
    "lch_to_hpluv",
    "hpluv_to_lch",
    "rgb_to_hex",
    "hex_to_rgb",
    # Gamut
    "get_bounds",
    "max_chroma",
    "max_pastel_chroma",
]
