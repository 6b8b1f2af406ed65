# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""Exception types raised by hsluvkit."""

from __future__ import annotations


class HSLuvError(Exception):
    """Base class for all hsluvkit errors."""


class HexParseError(HSLuvError, ValueError):
    """Hex color text is not of the form ``#rrggbb``."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid hex color {text!r}: {reason}")


class RGBRangeError(HSLuvError, ValueError):
    """
    An RGB channel is outside [0, 1] when encoding to hex.

    This is a caller precondition violation, not a recoverable condition:
    colors coming out of HSLuv/HPLuv are always in range.
    """

    def __init__(self, channel: str, value: float) -> None:
        self.channel = channel
        self.value = value
        super().__init__(f"Illegal RGB value for channel {channel}: {value}")


class SnapshotError(HSLuvError):
    """Snapshot data is malformed or missing samples."""
