"""Filesystem side: walking, reconciliation with the store, and rendering."""

from sunrise.tree.renderer import render
from sunrise.tree.sync import (
    DriftReport,
    clean,
    discover,
    drift,
    find_new,
    find_stale,
    live_paths,
)
from sunrise.tree.walker import walk

__all__ = [
    "DriftReport",
    "clean",
    "discover",
    "drift",
    "find_new",
    "find_stale",
    "live_paths",
    "render",
    "walk",
]
