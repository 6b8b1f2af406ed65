# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Pairwise color conversions.

One function per adjacent pair in the pipeline:

    RGB ↔ XYZ ↔ LUV ↔ LCH ↔ HSLuv | HPLuv,   RGB ↔ Hex

References:
- sRGB transfer function: IEC 61966-2-1
- CIE LUV: CIE 15:2004
- HSLuv / HPLuv: https://www.hsluv.org/math/

In the XYZ/LUV formulas Yn (the reference white luminance) is 1 under D65,
so it is dropped.
"""

from __future__ import annotations

import math
from typing import Union

from hsluvkit.convert.constants import (
    EPSILON,
    GREY_CHROMA,
    HEX_ROUND_PLACES,
    KAPPA,
    L_LINEAR_THRESHOLD,
    L_MAX,
    L_MIN,
    M_INV_ROWS,
    M_ROWS,
    REF_U,
    REF_V,
    SRGB_ENCODED_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SLOPE,
)
from hsluvkit.convert.gamut import max_chroma, max_pastel_chroma
from hsluvkit.convert.vector import dot_product
from hsluvkit.errors import RGBRangeError
from hsluvkit.schema.colors import HPLuv, HSLuv, Hex, LCH, LUV, RGB, XYZ


# =============================================================================
# XYZ ↔ RGB
# =============================================================================


def from_linear(c: float) -> float:
    """
    Linear-light channel to gamma-encoded sRGB.

    - For values <= 0.0031308: 12.92 * c
    - Otherwise: 1.055 * c^(1/2.4) - 0.055
    """
    if c <= SRGB_LINEAR_THRESHOLD:
        return SRGB_SLOPE * c
    return (1 + SRGB_OFFSET) * c ** (1 / SRGB_GAMMA) - SRGB_OFFSET


def to_linear(c: float) -> float:
    """Inverse of from_linear."""
    if c > SRGB_ENCODED_THRESHOLD:
        return ((c + SRGB_OFFSET) / (1 + SRGB_OFFSET)) ** SRGB_GAMMA
    return c / SRGB_SLOPE


def xyz_to_rgb(xyz: XYZ) -> RGB:
    r, g, b = (from_linear(dot_product(row, xyz)) for row in M_ROWS)
    return RGB(r, g, b)


def rgb_to_xyz(rgb: RGB) -> XYZ:
    linear = (to_linear(rgb.r), to_linear(rgb.g), to_linear(rgb.b))
    x, y, z = (dot_product(row, linear) for row in M_INV_ROWS)
    return XYZ(x, y, z)


# =============================================================================
# XYZ ↔ LUV
# =============================================================================


def y_to_l(y: float) -> float:
    """Relative luminance Y to CIE lightness L."""
    if y <= EPSILON:
        return y * KAPPA
    return 116 * y ** (1 / 3) - 16


def l_to_y(L: float) -> float:
    """CIE lightness L to relative luminance Y."""
    if L <= L_LINEAR_THRESHOLD:
        return L / KAPPA
    return ((L + 16) / 116) ** 3


def xyz_to_luv(xyz: XYZ) -> LUV:
    L = y_to_l(xyz.y)
    if L == 0:
        # Black: u/v are undefined (0 / 0)
        return LUV(0.0, 0.0, 0.0)

    denom = xyz.x + 15 * xyz.y + 3 * xyz.z
    var_u = 4 * xyz.x / denom
    var_v = 9 * xyz.y / denom

    u = 13 * L * (var_u - REF_U)
    v = 13 * L * (var_v - REF_V)
    return LUV(L, u, v)


def luv_to_xyz(luv: LUV) -> XYZ:
    if luv.l == 0:
        return XYZ(0.0, 0.0, 0.0)

    var_u = luv.u / (13 * luv.l) + REF_U
    var_v = luv.v / (13 * luv.l) + REF_V

    y = l_to_y(luv.l)
    x = 0 - (9 * y * var_u) / ((var_u - 4) * var_v - var_u * var_v)
    z = (9 * y - 15 * var_v * y - var_v * x) / (3 * var_v)
    return XYZ(x, y, z)


# =============================================================================
# LUV ↔ LCH
# =============================================================================


def luv_to_lch(luv: LUV) -> LCH:
    c = math.sqrt(luv.u ** 2 + luv.v ** 2)

    if c < GREY_CHROMA:
        # Greys: hue is meaningless, pin it to 0
        return LCH(luv.l, c, 0.0)

    h = math.degrees(math.atan2(luv.v, luv.u))
    if h < 0:
        h = 360 + h
    return LCH(luv.l, c, h)


def lch_to_luv(lch: LCH) -> LUV:
    hrad = math.radians(lch.h)
    return LUV(lch.l, math.cos(hrad) * lch.c, math.sin(hrad) * lch.c)


# =============================================================================
# LCH ↔ HSLuv / HPLuv
# =============================================================================


def _is_degenerate(L: float) -> bool:
    """True for black and white, where the gamut is a single point."""
    return not L_MIN <= L <= L_MAX


def lch_to_hsluv(lch: LCH) -> HSLuv:
    if _is_degenerate(lch.l):
        return HSLuv(lch.h, 0.0, lch.l)
    s = lch.c / max_chroma(lch.l, lch.h) * 100
    return HSLuv(lch.h, s, lch.l)


def hsluv_to_lch(hsluv: HSLuv) -> LCH:
    if _is_degenerate(hsluv.l):
        return LCH(hsluv.l, 0.0, hsluv.h)
    c = max_chroma(hsluv.l, hsluv.h) / 100 * hsluv.s
    return LCH(hsluv.l, c, hsluv.h)


def lch_to_hpluv(lch: LCH) -> HPLuv:
    if _is_degenerate(lch.l):
        return HPLuv(lch.h, 0.0, lch.l)
    s = lch.c / max_pastel_chroma(lch.l) * 100
    return HPLuv(lch.h, s, lch.l)


def hpluv_to_lch(hpluv: HPLuv) -> LCH:
    if _is_degenerate(hpluv.l):
        return LCH(hpluv.l, 0.0, hpluv.h)
    c = max_pastel_chroma(hpluv.l) / 100 * hpluv.s
    return LCH(hpluv.l, c, hpluv.h)


# =============================================================================
# RGB ↔ Hex
# =============================================================================


def _channel_to_hex(name: str, value: float) -> str:
    ch = round(value, HEX_ROUND_PLACES)
    if ch < 0 or ch > 1:
        raise RGBRangeError(name, ch)
    return f"{math.floor(ch * 255 + 0.5):02x}"


def rgb_to_hex(rgb: RGB) -> Hex:
    """
    Encode RGB as ``#rrggbb``.

    Raises:
        RGBRangeError: If a channel rounds to a value outside [0, 1]
    """
    digits = "".join(
        _channel_to_hex(name, value)
        for name, value in (("r", rgb.r), ("g", rgb.g), ("b", rgb.b))
    )
    return Hex("#" + digits)


def hex_to_rgb(hex_color: Union[Hex, str]) -> RGB:
    """
    Decode ``#rrggbb`` to RGB in [0, 1].

    Raises:
        HexParseError: If given a string that is not a valid hex color
    """
    if not isinstance(hex_color, Hex):
        hex_color = Hex(hex_color)

    value = int(hex_color.string[1:], 16)
    return RGB(
        ((value & 0xFF0000) >> 16) / 255.0,
        ((value & 0x00FF00) >> 8) / 255.0,
        (value & 0x0000FF) / 255.0,
    )
