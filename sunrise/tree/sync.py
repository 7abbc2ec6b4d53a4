"""Reconcile the store against the live filesystem.

Two passes, each of which may mutate the store through the user's answers:

- discovery: live paths without a description are offered for annotation
- staleness: descriptions whose path no longer exists are offered for removal
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field

from sunrise.config.models import WalkerConfig
from sunrise.errors import PathError
from sunrise.prompt import Decision, Prompter, ask, parse_decision
from sunrise.store.paths import is_root_key
from sunrise.store.store import AnnotationStore
from sunrise.tree.walker import walk

logger = logging.getLogger(__name__)


class DriftReport(BaseModel):
    """Paths that differ between the store and the filesystem."""

    new: list[str] = Field(default_factory=list)
    stale: list[str] = Field(default_factory=list)
    total_live: int = 0
    total_described: int = 0

    @property
    def has_drift(self) -> bool:
        return bool(self.new or self.stale)


def live_paths(
    store: AnnotationStore,
    directory: Path,
    config: WalkerConfig | None = None,
) -> list[PurePosixPath]:
    """Walk *directory* and return each entry as a key relative to the store root."""
    seen: dict[PurePosixPath, None] = {}
    for path in walk(directory, config):
        try:
            key = store.relative(path)
        except PathError as e:
            logger.warning("skipping %s: %s", path, e)
            continue
        if is_root_key(key):
            continue
        seen.setdefault(key, None)
    return list(seen)


def find_new(store: AnnotationStore, live: list[PurePosixPath]) -> list[PurePosixPath]:
    return [path for path in live if path not in store]


def find_stale(store: AnnotationStore) -> list[PurePosixPath]:
    return [path for path in store.known_paths() if not store.exists(path)]


def drift(store: AnnotationStore, live: list[PurePosixPath]) -> DriftReport:
    """Summarize new and stale paths without prompting."""
    return DriftReport(
        new=[str(p) for p in find_new(store, live)],
        stale=[str(p) for p in find_stale(store)],
        total_live=len(live),
        total_described=len(store),
    )


def discover(
    store: AnnotationStore,
    live: list[PurePosixPath],
    prompter: Prompter,
) -> bool:
    """Offer every undescribed live path for annotation. Returns True if any was added."""
    changed = False
    for path in live:
        if path in store:
            continue
        text = prompter.line(f"{path}: Add description or press enter to ignore: ")
        if text:
            store.set(path, text)
            logger.info("described %s", path)
            changed = True
    return changed


def clean(store: AnnotationStore, prompter: Prompter) -> bool:
    """Offer every stale description for removal (default yes). Returns True if any was removed."""
    changed = False
    for path in store.known_paths():
        if store.exists(path):
            continue
        decision = ask(
            prompter,
            f"{path} no longer exists. Would you like to remove it? [Y/n]: ",
            parse_decision,
            default=Decision.YES,
        )
        if decision is Decision.YES:
            store.remove(path)
            logger.info("removed stale %s", path)
            changed = True
    return changed
