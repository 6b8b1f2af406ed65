# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Color value types for hsluvkit.

All types in this module are immutable (frozen dataclasses).
Every conversion produces a new value.
"""

from hsluvkit.schema.colors import (
    HPLuv,
    HSLuv,
    LCH,
    LUV,
    RGB,
    XYZ,
    ColorTuple,
    Hex,
)

__all__ = [
    # Tuple-like color values
    "RGB",
    "XYZ",
    "LUV",
    "LCH",
    "HSLuv",
    "HPLuv",
    # Encodings
    "Hex",
    # Three-component view shared by tuple-like values
    "ColorTuple",
]
