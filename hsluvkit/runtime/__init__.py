# Copyright (c) 2026 hsluvkit
# SPDX-License-Identifier: MIT

"""
Regression snapshot runtime for hsluvkit.

Builds, serializes and compares the reference dataset of
hex sample → RGB/XYZ/LUV/LCH/HSLuv/HPLuv values.
"""

from hsluvkit.runtime.snapshot import (
    SNAPSHOT_TAGS,
    SnapshotFormat,
    SnapshotMismatch,
    build_snapshot,
    compare_snapshots,
    hex_samples,
    load_snapshot,
    save_snapshot,
    snapshot_from_json,
    snapshot_to_json,
)

__all__ = [
    "build_snapshot",
    "compare_snapshots",
    "hex_samples",
    "load_snapshot",
    "save_snapshot",
    "snapshot_from_json",
    "snapshot_to_json",
    "SnapshotMismatch",
    "SNAPSHOT_TAGS",
    "SnapshotFormat",
]
