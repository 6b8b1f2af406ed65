# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
2D line and 3-vector helpers used by the gamut boundary engine.

Lines are ``(m, b)`` pairs in slope-intercept form: y = m * x + b.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

from hsluvkit.schema.colors import RGB, XYZ, ColorTuple

Line = tuple[float, float]
Point = tuple[float, float]


def intersect_line(line1: Line, line2: Line) -> float:
    """
    Return the x coordinate where two lines cross.

    The lines must not be parallel.
    """
    m1, b1 = line1
    m2, b2 = line2
    return (b1 - b2) / (m2 - m1)


def distance_from_pole(point: Point) -> float:
    """Euclidean distance of a point from the origin."""
    x, y = point
    return math.sqrt(x ** 2 + y ** 2)


def length_of_ray_until_intersect(theta: float, line: Line) -> Optional[float]:
    """
    Length of a ray from the origin at angle ``theta`` until it hits ``line``.

    With the intersection at (length * cos(theta), length * sin(theta)) and
    b + m * x = y on the line:

        length = b / (sin(theta) - m * cos(theta))

    Args:
        theta: Ray angle in radians
        line: ``(m, b)`` of the line

    Returns:
        The length, or None when the line is behind the origin
        along this direction.
    """
    m, b = line
    length = b / (math.sin(theta) - m * math.cos(theta))
    if length < 0:
        return None
    return length


def dot_product(a: ColorTuple, b: Union[Sequence[float], RGB, XYZ]) -> float:
    """
    Dot product of a 3-tuple with a 3-vector.

    ``b`` may be a plain sequence or any color value exposing ``.tuple``.
    """
    b0, b1, b2 = b.tuple if hasattr(b, "tuple") else b
    return a[0] * b0 + a[1] * b1 + a[2] * b2
