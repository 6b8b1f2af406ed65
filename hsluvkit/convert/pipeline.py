# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Full conversion chains.

    HSLuv → LCH → LUV → XYZ → RGB
    HPLuv → LCH → LUV → XYZ → RGB
    RGB → XYZ → LUV → LCH → HSLuv
    RGB → XYZ → LUV → LCH → HPLuv
"""

from __future__ import annotations

from typing import Union

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
from hsluvkit.schema.colors import HPLuv, HSLuv, Hex, RGB


def hsluv_to_rgb(hsluv: HSLuv) -> RGB:
    return xyz_to_rgb(luv_to_xyz(lch_to_luv(hsluv_to_lch(hsluv))))


def hpluv_to_rgb(hpluv: HPLuv) -> RGB:
    return xyz_to_rgb(luv_to_xyz(lch_to_luv(hpluv_to_lch(hpluv))))


def rgb_to_hsluv(rgb: RGB) -> HSLuv:
    return lch_to_hsluv(luv_to_lch(xyz_to_luv(rgb_to_xyz(rgb))))


def rgb_to_hpluv(rgb: RGB) -> HPLuv:
    return lch_to_hpluv(luv_to_lch(xyz_to_luv(rgb_to_xyz(rgb))))


# =============================================================================
# Convenience: Hex ↔ HSLuv / HPLuv
# =============================================================================


def hsluv_to_hex(hsluv: HSLuv) -> Hex:
    """
    Convert HSLuv to a ``#rrggbb`` string.

    Example:
        >>> hsluv_to_hex(HSLuv(0, 0, 100)).string
        '#ffffff'
    """
    return rgb_to_hex(hsluv_to_rgb(hsluv))


def hpluv_to_hex(hpluv: HPLuv) -> Hex:
    return rgb_to_hex(hpluv_to_rgb(hpluv))


def hex_to_hsluv(hex_color: Union[Hex, str]) -> HSLuv:
    return rgb_to_hsluv(hex_to_rgb(hex_color))


def hex_to_hpluv(hex_color: Union[Hex, str]) -> HPLuv:
    return rgb_to_hpluv(hex_to_rgb(hex_color))
