# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Distinct: An RGB is never accepted where an XYZ is expected, even though
  both are three floats
- Behavior-free: Conversion methods only delegate to
  ``hsluvkit.convert.pairwise``

Pipeline order (no step is skippable):

    RGB ↔ XYZ ↔ LUV ↔ LCH ↔ HSLuv | HPLuv

Ranges:
- RGB: gamma-encoded sRGB, nominally 0-1 (not clamped here)
- XYZ: CIE 1931 under D65, white has Y = 1
- LUV / LCH: L 0-100, H 0-360 degrees
- HSLuv / HPLuv: H 0-360 degrees, S and L 0-100
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from hsluvkit.errors import HexParseError


ColorTuple = tuple[float, float, float]

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


# =============================================================================
# Device / Tristimulus
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """
    Red, Green, Blue (gamma-encoded sRGB).

    Attributes:
        r: Red channel, nominally 0-1
        g: Green channel, nominally 0-1
        b: Blue channel, nominally 0-1
    """
    r: float
    g: float
    b: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.r, self.g, self.b)

    def to_xyz(self) -> XYZ:
        """Convert to CIE XYZ (undo sRGB transfer, apply inverse matrix)."""
        from hsluvkit.convert.pairwise import rgb_to_xyz
        return rgb_to_xyz(self)

    def to_hex(self) -> Hex:
        """
        Encode as ``#rrggbb``.

        Raises:
            RGBRangeError: If a channel is outside [0, 1] after rounding
        """
        from hsluvkit.convert.pairwise import rgb_to_hex
        return rgb_to_hex(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class XYZ:
    """
    CIE 1931 tristimulus values under illuminant D65.

    Attributes:
        x: X tristimulus
        y: Luminance, 1.0 for reference white
        z: Z tristimulus
    """
    x: float
    y: float
    z: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.x, self.y, self.z)

    def to_rgb(self) -> RGB:
        from hsluvkit.convert.pairwise import xyz_to_rgb
        return xyz_to_rgb(self)

    def to_luv(self) -> LUV:
        from hsluvkit.convert.pairwise import xyz_to_luv
        return xyz_to_luv(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict) -> XYZ:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], z=data["z"])


# =============================================================================
# CIE LUV and its polar form
# =============================================================================


@dataclass(frozen=True, slots=True)
class LUV:
    """
    CIE 1976 L*u*v*.

    Attributes:
        l: Lightness (0 = black, 100 = white)
        u: Red-green chromaticity coordinate
        v: Yellow-blue chromaticity coordinate
    """
    l: float
    u: float
    v: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.l, self.u, self.v)

    def to_xyz(self) -> XYZ:
        from hsluvkit.convert.pairwise import luv_to_xyz
        return luv_to_xyz(self)

    def to_lch(self) -> LCH:
        from hsluvkit.convert.pairwise import luv_to_lch
        return luv_to_lch(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "u": self.u, "v": self.v}

    @classmethod
    def from_dict(cls, data: dict) -> LUV:
        """Deserialize from dictionary."""
        return cls(l=data["l"], u=data["u"], v=data["v"])


@dataclass(frozen=True, slots=True)
class LCH:
    """
    Lightness, Chroma, Hue: the cylindrical form of LUV.

    Attributes:
        l: Lightness (0-100)
        c: Chroma (>= 0, radial distance in the u/v plane)
        h: Hue in degrees (0-360); 0 for greys
    """
    l: float
    c: float
    h: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.l, self.c, self.h)

    def to_luv(self) -> LUV:
        from hsluvkit.convert.pairwise import lch_to_luv
        return lch_to_luv(self)

    def to_hsluv(self) -> HSLuv:
        """Normalize chroma against the hue-dependent gamut maximum."""
        from hsluvkit.convert.pairwise import lch_to_hsluv
        return lch_to_hsluv(self)

    def to_hpluv(self) -> HPLuv:
        """Normalize chroma against the hue-independent gamut maximum."""
        from hsluvkit.convert.pairwise import lch_to_hpluv
        return lch_to_hpluv(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: dict) -> LCH:
        """Deserialize from dictionary."""
        return cls(l=data["l"], c=data["c"], h=data["h"])


# =============================================================================
# Human-friendly models
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLuv:
    """
    HSLuv: Hue, Saturation, Lightness over CIE LUV.

    Saturation 100 is the most chromatic in-gamut color for this exact
    hue and lightness.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation (0-100)
        l: Lightness (0-100)
    """
    h: float
    s: float
    l: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.h, self.s, self.l)

    def to_lch(self) -> LCH:
        from hsluvkit.convert.pairwise import hsluv_to_lch
        return hsluv_to_lch(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSLuv:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


@dataclass(frozen=True, slots=True)
class HPLuv:
    """
    HPLuv: the pastel variant of HSLuv.

    Saturation is normalized against the chroma that is safe for every hue
    at this lightness, so any (h, s <= 100, l) is inside the gamut.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation (0-100 is always in gamut)
        l: Lightness (0-100)
    """
    h: float
    s: float
    l: float

    @property
    def tuple(self) -> ColorTuple:
        return (self.h, self.s, self.l)

    def to_lch(self) -> LCH:
        from hsluvkit.convert.pairwise import hpluv_to_lch
        return hpluv_to_lch(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HPLuv:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


# =============================================================================
# Encodings
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hex:
    """
    Hexadecimal color string.

    Accepts ``#rrggbb`` or ``rrggbb`` in either case and always stores the
    canonical lowercase ``#rrggbb`` form.

    Attributes:
        string: Canonical hex string like "#3941c8"

    Raises:
        HexParseError: If the text is not six hex digits
    """
    string: str

    def __post_init__(self) -> None:
        if not isinstance(self.string, str):
            raise HexParseError(repr(self.string), "expected a string")
        m = _HEX_RE.fullmatch(self.string)
        if m is None:
            digits = self.string.lstrip("#")
            if len(digits) != 6:
                reason = f"expected 6 hex digits, got {len(digits)}"
            else:
                reason = "contains non-hex characters"
            raise HexParseError(self.string, reason)
        object.__setattr__(self, "string", "#" + m.group(1).lower())

    def __str__(self) -> str:
        return self.string

    def to_rgb(self) -> RGB:
        from hsluvkit.convert.pairwise import hex_to_rgb
        return hex_to_rgb(self)
