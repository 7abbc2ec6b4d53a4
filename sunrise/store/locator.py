"""Upward search for the store file, and creation of new stores."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from sunrise.console import console
from sunrise.errors import PathError, StoreIOError, StoreNotFoundError
from sunrise.store.codec import encode
from sunrise.store.store import STORE_FILENAME, AnnotationStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitResult:
    """Outcome of ``init_store``."""

    path: Path
    created: bool


def _candidates(start: Path) -> list[Path]:
    """*start* followed by each of its ancestors, nearest first."""
    start = Path(os.path.abspath(start))
    return [start, *start.parents]


def find_store_file(start_dir: Path) -> Path | None:
    """Return the nearest ``.sunrise`` at or above *start_dir*, if any."""
    for directory in _candidates(start_dir):
        candidate = directory / STORE_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate(start_dir: Path, *, verbose: bool = False) -> AnnotationStore:
    """Load the store governing *start_dir*.

    Walks from *start_dir* up to the filesystem root and loads the first
    ``.sunrise`` found. The store's root is that file's directory.
    """
    store_file = find_store_file(start_dir)
    if store_file is None:
        raise StoreNotFoundError(Path(start_dir), STORE_FILENAME)

    console.print(f"[bold]Using {escape(str(store_file))}[/bold]")
    store = AnnotationStore.load(store_file.parent)
    logger.debug("located store %s for %s", store.store_path, start_dir)

    if verbose:
        console.print(f"store_path: {escape(str(store.store_path))}")
        console.print(f"root: {escape(str(store.root))}")
        console.print(f"descriptions: {len(store)}")
        console.print("-----")

    return store


def init_store(directory: Path) -> InitResult:
    """Create an empty ``.sunrise`` in *directory* unless one already exists."""
    if not directory.is_dir():
        raise PathError(f"{directory} is not a directory")

    store_path = directory / STORE_FILENAME
    if store_path.exists():
        return InitResult(path=store_path, created=False)

    try:
        with open(store_path, "xb") as f:
            f.write(encode({}))
    except FileExistsError:
        return InitResult(path=store_path, created=False)
    except OSError as e:
        raise StoreIOError(store_path, "create", e) from e
    logger.info("created %s", store_path)
    return InitResult(path=store_path, created=True)
