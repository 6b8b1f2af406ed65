# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Reference snapshot dataset.

A snapshot maps each sample hex color to the forward-computed value at
every pipeline stage:

    {
      "#11aaff": {
        "rgb":   [r, g, b],
        "xyz":   [x, y, z],
        "luv":   [l, u, v],
        "lch":   [l, c, h],
        "hsluv": [h, s, l],
        "hpluv": [h, s, l]
      },
      ...
    }

A stable snapshot is stored as JSON and compared against a freshly built
one to catch numeric regressions. It is a test artifact, not a runtime
interface.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from hsluvkit.errors import SnapshotError
from hsluvkit.schema.colors import Hex

logger = logging.getLogger(__name__)

Snapshot = dict[str, dict[str, list[float]]]

SNAPSHOT_TAGS = ("rgb", "xyz", "luv", "lch", "hsluv", "hpluv")

_NIBBLES = "0123456789abcdef"


class SnapshotFormat(Enum):
    """JSON layout written by ``snapshot_to_json``."""

    COMPACT = "compact"
    INDENTED = "indented"


@dataclass(frozen=True, slots=True)
class SnapshotMismatch:
    """
    One channel that differs between a stable and a current snapshot.

    Attributes:
        hex: Sample color
        tag: Pipeline stage ("rgb", "xyz", ...)
        index: Channel index within the stage (0-2)
        stable: Value in the stable snapshot
        current: Value in the current snapshot
    """
    hex: str
    tag: str
    index: int
    stable: float
    current: float

    @property
    def diff(self) -> float:
        return abs(self.current - self.stable)

    def __str__(self) -> str:
        return (
            f"{self.hex}:{self.tag}[{self.index}] "
            f"stable={self.stable!r} current={self.current!r}"
        )


def hex_samples() -> list[str]:
    """
    All 4096 colors whose channels are equal-nibble bytes (00, 11, ..., ff).

    Returns:
        Hex strings like "#0011ff", in r-major order
    """
    return [
        f"#{r}{r}{g}{g}{b}{b}"
        for r in _NIBBLES
        for g in _NIBBLES
        for b in _NIBBLES
    ]


def build_snapshot(samples: Optional[Iterable[str]] = None) -> Snapshot:
    """
    Compute every pipeline stage for each sample.

    Args:
        samples: Hex strings; defaults to ``hex_samples()``

    Returns:
        Snapshot dictionary keyed by canonical hex string
    """
    if samples is None:
        samples = hex_samples()

    snapshot: Snapshot = {}
    for sample in samples:
        hex_color = Hex(sample)
        rgb = hex_color.to_rgb()
        xyz = rgb.to_xyz()
        luv = xyz.to_luv()
        lch = luv.to_lch()

        snapshot[hex_color.string] = {
            "rgb": list(rgb.tuple),
            "xyz": list(xyz.tuple),
            "luv": list(luv.tuple),
            "lch": list(lch.tuple),
            "hsluv": list(lch.to_hsluv().tuple),
            "hpluv": list(lch.to_hpluv().tuple),
        }

    logger.debug("Built snapshot with %d samples", len(snapshot))
    return snapshot


def compare_snapshots(
    stable: Snapshot,
    current: Snapshot,
    *,
    tolerance: float = 1e-9,
    tags: Optional[Iterable[str]] = None,
) -> list[SnapshotMismatch]:
    """
    Compare a current snapshot against a stable one.

    Every sample and tag in ``stable`` must be present in ``current``;
    extra entries in ``current`` are ignored.

    Args:
        stable: Reference snapshot
        current: Freshly built snapshot
        tolerance: Maximum absolute difference per channel
        tags: Stages to compare; defaults to every tag in ``stable``

    Returns:
        Mismatches, empty when the snapshots agree

    Raises:
        SnapshotError: If a sample, tag or channel is missing from ``current``
    """
    wanted = set(tags) if tags is not None else None
    mismatches = []

    for hex_color, stable_samples in stable.items():
        current_samples = current.get(hex_color)
        if current_samples is None:
            raise SnapshotError(f"Current sample is missing at {hex_color}")

        for tag, stable_tuple in stable_samples.items():
            if wanted is not None and tag not in wanted:
                continue
            current_tuple = current_samples.get(tag)
            if current_tuple is None:
                raise SnapshotError(f"Current tuple is missing at {hex_color}:{tag}")
            if len(current_tuple) != len(stable_tuple):
                raise SnapshotError(
                    f"Channel count differs at {hex_color}:{tag}: "
                    f"{len(stable_tuple)} vs {len(current_tuple)}"
                )

            for i, (s, c) in enumerate(zip(stable_tuple, current_tuple)):
                if abs(c - s) > tolerance:
                    mismatches.append(SnapshotMismatch(hex_color, tag, i, s, c))

    if mismatches:
        logger.warning(
            "Snapshot differs in %d channels (tolerance %g); first: %s",
            len(mismatches), tolerance, mismatches[0],
        )
    return mismatches


# =============================================================================
# JSON
# =============================================================================


def snapshot_to_json(
    snapshot: Snapshot,
    *,
    format: SnapshotFormat = SnapshotFormat.COMPACT,
) -> str:
    """Serialize a snapshot. Keys are sorted for stable diffs."""
    if format == SnapshotFormat.INDENTED:
        return json.dumps(snapshot, indent=2, sort_keys=True)
    else:
        return json.dumps(snapshot, separators=(",", ":"), sort_keys=True)


def snapshot_from_json(text: str) -> Snapshot:
    """
    Parse a snapshot from JSON.

    Raises:
        SnapshotError: If the document is not a snapshot mapping
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a JSON object keyed by hex color")

    for hex_color, samples in data.items():
        if not isinstance(samples, dict):
            raise SnapshotError(f"Samples for {hex_color} must be an object")
        for tag, values in samples.items():
            if not isinstance(values, list) or len(values) != 3:
                raise SnapshotError(f"Expected 3 values at {hex_color}:{tag}")
    return data


def save_snapshot(
    snapshot: Snapshot,
    path: Union[str, Path],
    *,
    format: SnapshotFormat = SnapshotFormat.INDENTED,
) -> Path:
    """Write a snapshot to ``path`` and return the path."""
    path = Path(path)
    path.write_text(snapshot_to_json(snapshot, format=format), encoding="utf-8")
    logger.debug("Saved snapshot with %d samples to %s", len(snapshot), path)
    return path


def load_snapshot(path: Union[str, Path]) -> Snapshot:
    """
    Read a snapshot written by ``save_snapshot``.

    Raises:
        SnapshotError: If the file content is not a snapshot
    """
    path = Path(path)
    snapshot = snapshot_from_json(path.read_text(encoding="utf-8"))
    logger.debug("Loaded snapshot with %d samples from %s", len(snapshot), path)
    return snapshot
