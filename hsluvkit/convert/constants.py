# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Fixed constants for the conversion pipeline.

Matrices are sRGB primaries under D65 with white normalized to Y = 1.
Rows are kept as plain tuples for the scalar path and as NumPy arrays for
the batch path; both are built from the same numbers.
"""

from __future__ import annotations

import numpy as np


# =============================================================================
# sRGB ↔ XYZ
# =============================================================================

# XYZ → linear RGB, one row per output channel (R, G, B)
M_ROWS = (
    (3.2409699419045214, -1.5373831775700935, -0.49861076029300328),
    (-0.96924363628087983, 1.8759675015077207, 0.041555057407175613),
    (0.055630079696993609, -0.20397695888897657, 1.0569715142428786),
)

# linear RGB → XYZ, one row per output component (X, Y, Z)
M_INV_ROWS = (
    (0.41239079926595948, 0.35758433938387796, 0.18048078840183429),
    (0.21263900587151036, 0.71516867876775593, 0.072192315360733715),
    (0.019330818715591851, 0.11919477979462599, 0.95053215224966058),
)

M = np.array(M_ROWS, dtype=np.float64)
M_INV = np.array(M_INV_ROWS, dtype=np.float64)

# sRGB transfer function
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_ENCODED_THRESHOLD = 0.04045
SRGB_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_GAMMA = 2.4


# =============================================================================
# CIE LUV
# =============================================================================

# D65 reference white chromaticity (u', v')
REF_U = 0.19783000664283681
REF_V = 0.468319994938791

# CIE constants: kappa = (29/3)^3, epsilon = (6/29)^3
KAPPA = 903.2962962962963
EPSILON = 0.0088564516790356308

# L at or below which lightness is linear in Y (kappa * epsilon)
L_LINEAR_THRESHOLD = 8.0


# =============================================================================
# Degeneracy and encoding
# =============================================================================

# Lightness outside (L_MIN, L_MAX) is treated as black/white
L_MIN = 0.00000001
L_MAX = 99.9999999

# Chroma below this is grey and gets hue 0
GREY_CHROMA = 0.00000001

# Channels are rounded to this many places before hex range checking
HEX_ROUND_PLACES = 6

# Boundary lines are memoized per lightness
BOUNDS_CACHE_SIZE = 1024
