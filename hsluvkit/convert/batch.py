# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Vectorized conversions over NumPy arrays.

Every function takes and returns arrays of shape (..., 3) whose last axis
holds the same components, in the same order, as the matching value type
(``RGB`` is r, g, b; ``HSLuv`` is h, s, l; and so on). Results agree
elementwise with the scalar functions in ``hsluvkit.convert.pairwise``,
including the black/white and grey disambiguation rules.

Gamut bounds are computed per element, so arrays may mix lightnesses.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hsluvkit.convert.constants import (
    EPSILON,
    GREY_CHROMA,
    KAPPA,
    L_LINEAR_THRESHOLD,
    L_MAX,
    L_MIN,
    M,
    M_INV,
    REF_U,
    REF_V,
    SRGB_ENCODED_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    SRGB_SLOPE,
)


def _split(arr: ArrayLike) -> tuple[NDArray[np.float64], ...]:
    arr = np.asarray(arr, dtype=np.float64)
    if arr.shape[-1:] != (3,):
        raise ValueError(f"Expected array of shape (..., 3), got {arr.shape}")
    return arr[..., 0], arr[..., 1], arr[..., 2]


# =============================================================================
# XYZ ↔ RGB
# =============================================================================


def xyz_to_rgb_array(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert XYZ to gamma-encoded sRGB.

    Out-of-gamut input yields channels outside [0, 1]; nothing is clipped.
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    linear = np.einsum('...j,ij->...i', xyz, M)

    # Negative values only reach the linear segment; keep power() real
    linear_safe = np.maximum(linear, 0.0)
    return np.where(
        linear <= SRGB_LINEAR_THRESHOLD,
        SRGB_SLOPE * linear,
        (1 + SRGB_OFFSET) * np.power(linear_safe, 1.0 / SRGB_GAMMA) - SRGB_OFFSET,
    )


def rgb_to_xyz_array(rgb: ArrayLike) -> NDArray[np.float64]:
    rgb = np.asarray(rgb, dtype=np.float64)
    rgb_safe = np.maximum(rgb, 0.0)
    linear = np.where(
        rgb > SRGB_ENCODED_THRESHOLD,
        np.power((rgb_safe + SRGB_OFFSET) / (1 + SRGB_OFFSET), SRGB_GAMMA),
        rgb / SRGB_SLOPE,
    )
    return np.einsum('...j,ij->...i', linear, M_INV)


# =============================================================================
# XYZ ↔ LUV
# =============================================================================


def xyz_to_luv_array(xyz: ArrayLike) -> NDArray[np.float64]:
    X, Y, Z = _split(xyz)

    L = np.where(
        Y <= EPSILON,
        Y * KAPPA,
        116 * np.power(np.maximum(Y, 0.0), 1.0 / 3.0) - 16,
    )
    black = L == 0

    with np.errstate(divide="ignore", invalid="ignore"):
        denom = X + 15 * Y + 3 * Z
        var_u = 4 * X / denom
        var_v = 9 * Y / denom
        U = np.where(black, 0.0, 13 * L * (var_u - REF_U))
        V = np.where(black, 0.0, 13 * L * (var_v - REF_V))

    return np.stack([L, U, V], axis=-1)


def luv_to_xyz_array(luv: ArrayLike) -> NDArray[np.float64]:
    L, U, V = _split(luv)
    black = L == 0
    L_safe = np.where(black, 1.0, L)

    var_u = U / (13 * L_safe) + REF_U
    var_v = V / (13 * L_safe) + REF_V

    Y = np.where(
        L_safe <= L_LINEAR_THRESHOLD,
        L_safe / KAPPA,
        ((L_safe + 16) / 116) ** 3,
    )
    with np.errstate(divide="ignore", invalid="ignore"):
        X = 0 - (9 * Y * var_u) / ((var_u - 4) * var_v - var_u * var_v)
        Z = (9 * Y - 15 * var_v * Y - var_v * X) / (3 * var_v)

    xyz = np.stack([X, Y, Z], axis=-1)
    return np.where(black[..., None], 0.0, xyz)


# =============================================================================
# LUV ↔ LCH
# =============================================================================


def luv_to_lch_array(luv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert LUV to LCH.

    Hue is in degrees [0, 360) and forced to 0 for greys (C < 1e-8).
    """
    L, U, V = _split(luv)

    C = np.sqrt(U ** 2 + V ** 2)
    H = np.degrees(np.arctan2(V, U))
    H = np.where(H < 0, H + 360, H)
    H = np.where(C < GREY_CHROMA, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def lch_to_luv_array(lch: ArrayLike) -> NDArray[np.float64]:
    L, C, H = _split(lch)
    H_rad = np.radians(H)
    return np.stack([L, np.cos(H_rad) * C, np.sin(H_rad) * C], axis=-1)


# =============================================================================
# Gamut bounds
# =============================================================================


def get_bounds_array(lightness: ArrayLike) -> NDArray[np.float64]:
    """
    Six gamut edges per lightness.

    Args:
        lightness: Array of L values, any shape S

    Returns:
        Array of shape S + (6, 2) holding ``(slope, intercept)`` per edge,
        in the same order as ``gamut.get_bounds``
    """
    L = np.asarray(lightness, dtype=np.float64)[..., None, None]
    sub1 = (L + 16) ** 3 / 1560896
    sub2 = np.where(sub1 > EPSILON, sub1, L / KAPPA)

    # Matrix rows along axis -2, t in (0, 1) along axis -1
    m1 = M[:, 0][:, None]
    m2 = M[:, 1][:, None]
    m3 = M[:, 2][:, None]
    t = np.array([0.0, 1.0])

    top1 = (284517 * m1 - 94839 * m3) * sub2
    top2 = (838422 * m3 + 769860 * m2 + 731718 * m1) * L * sub2 - 769860 * t * L
    bottom = (632260 * m3 - 126452 * m2) * sub2 + 126452 * t

    with np.errstate(divide="ignore", invalid="ignore"):
        slope = top1 / bottom
        intercept = top2 / bottom

    shape = slope.shape[:-2] + (6,)
    return np.stack([slope.reshape(shape), intercept.reshape(shape)], axis=-1)


def max_chroma_array(lightness: ArrayLike, hue: ArrayLike) -> NDArray[np.float64]:
    """Per-element maximum in-gamut chroma along each hue (HSLuv)."""
    bounds = get_bounds_array(lightness)
    m = bounds[..., 0]
    b = bounds[..., 1]
    hrad = np.radians(np.asarray(hue, dtype=np.float64))[..., None]

    with np.errstate(divide="ignore", invalid="ignore"):
        lengths = b / (np.sin(hrad) - m * np.cos(hrad))
    lengths = np.where(lengths < 0, np.inf, lengths)
    return np.min(lengths, axis=-1)


def max_pastel_chroma_array(lightness: ArrayLike) -> NDArray[np.float64]:
    """Per-element maximum chroma that is in gamut for every hue (HPLuv)."""
    bounds = get_bounds_array(lightness)
    m = bounds[..., 0]
    b = bounds[..., 1]

    with np.errstate(divide="ignore", invalid="ignore"):
        x = b / (-1 / m - m)
        y = b + x * m
        distances = np.sqrt(x ** 2 + y ** 2)
    return np.min(distances, axis=-1)


# =============================================================================
# LCH ↔ HSLuv / HPLuv
# =============================================================================


def _degenerate(L: NDArray[np.float64]) -> NDArray[np.bool_]:
    return (L < L_MIN) | (L > L_MAX)


def lch_to_hsluv_array(lch: ArrayLike) -> NDArray[np.float64]:
    L, C, H = _split(lch)
    with np.errstate(divide="ignore", invalid="ignore"):
        S = C / max_chroma_array(L, H) * 100
    S = np.where(_degenerate(L), 0.0, S)
    return np.stack([H, S, L], axis=-1)


def hsluv_to_lch_array(hsluv: ArrayLike) -> NDArray[np.float64]:
    H, S, L = _split(hsluv)
    with np.errstate(invalid="ignore"):
        C = max_chroma_array(L, H) / 100 * S
    C = np.where(_degenerate(L), 0.0, C)
    return np.stack([L, C, H], axis=-1)


def lch_to_hpluv_array(lch: ArrayLike) -> NDArray[np.float64]:
    L, C, H = _split(lch)
    with np.errstate(divide="ignore", invalid="ignore"):
        S = C / max_pastel_chroma_array(L) * 100
    S = np.where(_degenerate(L), 0.0, S)
    return np.stack([H, S, L], axis=-1)


def hpluv_to_lch_array(hpluv: ArrayLike) -> NDArray[np.float64]:
    H, S, L = _split(hpluv)
    with np.errstate(invalid="ignore"):
        C = max_pastel_chroma_array(L) / 100 * S
    C = np.where(_degenerate(L), 0.0, C)
    return np.stack([L, C, H], axis=-1)


# =============================================================================
# Full chains
# =============================================================================


def hsluv_to_rgb_array(hsluv: ArrayLike) -> NDArray[np.float64]:
    """
    Convert HSLuv to sRGB.

    Full chain: HSLuv → LCH → LUV → XYZ → RGB

    Args:
        hsluv: Array of shape (..., 3) with (H, S, L)

    Returns:
        Array of shape (..., 3) with sRGB values, in [0, 1] for valid input
    """
    return xyz_to_rgb_array(luv_to_xyz_array(lch_to_luv_array(hsluv_to_lch_array(hsluv))))


def hpluv_to_rgb_array(hpluv: ArrayLike) -> NDArray[np.float64]:
    return xyz_to_rgb_array(luv_to_xyz_array(lch_to_luv_array(hpluv_to_lch_array(hpluv))))


def rgb_to_hsluv_array(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB to HSLuv.

    Full chain: RGB → XYZ → LUV → LCH → HSLuv
    """
    return lch_to_hsluv_array(luv_to_lch_array(xyz_to_luv_array(rgb_to_xyz_array(rgb))))


def rgb_to_hpluv_array(rgb: ArrayLike) -> NDArray[np.float64]:
    return lch_to_hpluv_array(luv_to_lch_array(xyz_to_luv_array(rgb_to_xyz_array(rgb))))
