# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Gamut boundary engine.

For a fixed lightness L, the sRGB cube projects onto the LUV u/v plane as
a convex hexagon. Each of the three RGB channels contributes two edges:
the plane where that channel is 0 and the plane where it is 1. Both HSLuv
and HPLuv measure saturation against distances to these six lines.

Callers must not ask for bounds at L = 0 or L = 100, where the hexagon
collapses to a point (see ``L_MIN`` / ``L_MAX``).
"""

from __future__ import annotations

import functools
import math

from hsluvkit.convert.constants import BOUNDS_CACHE_SIZE, EPSILON, KAPPA, M_ROWS
from hsluvkit.convert.vector import (
    Line,
    distance_from_pole,
    intersect_line,
    length_of_ray_until_intersect,
)


@functools.lru_cache(maxsize=BOUNDS_CACHE_SIZE)
def get_bounds(lightness: float) -> tuple[Line, ...]:
    """
    Six gamut edges in the u/v plane for a given lightness.

    Args:
        lightness: L in (0, 100)

    Returns:
        Six ``(slope, intercept)`` lines, ordered R0, R1, G0, G1, B0, B1
    """
    L = lightness
    sub1 = (L + 16) ** 3 / 1560896
    sub2 = sub1 if sub1 > EPSILON else L / KAPPA

    bounds = []
    for m1, m2, m3 in M_ROWS:
        for t in (0.0, 1.0):
            top1 = (284517 * m1 - 94839 * m3) * sub2
            top2 = (838422 * m3 + 769860 * m2 + 731718 * m1) * L * sub2 - 769860 * t * L
            bottom = (632260 * m3 - 126452 * m2) * sub2 + 126452 * t
            bounds.append((top1 / bottom, top2 / bottom))

    return tuple(bounds)


def max_chroma(lightness: float, hue: float) -> float:
    """
    Largest in-gamut chroma for this lightness along one hue.

    Casts a ray from the origin at ``hue`` and returns the distance to the
    nearest gamut edge in front of it.

    Args:
        lightness: L in (0, 100)
        hue: Hue in degrees

    Returns:
        Maximum chroma (HSLuv saturation 100)
    """
    hrad = math.radians(hue)
    lengths = (
        length_of_ray_until_intersect(hrad, line)
        for line in get_bounds(lightness)
    )
    return min((length for length in lengths if length is not None), default=math.inf)


def max_pastel_chroma(lightness: float) -> float:
    """
    Largest chroma that stays in gamut for every hue at this lightness.

    For each edge, the closest point to the origin is the foot of the
    perpendicular through the origin; the answer is the smallest such
    distance.
    """
    lengths = []
    for m, b in get_bounds(lightness):
        x = intersect_line((m, b), (-1 / m, 0.0))
        lengths.append(distance_from_pole((x, b + x * m)))

    return min(lengths)
