"""AnnotationStore: the path -> description mapping bound to its backing file."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath

from sunrise.errors import PathError, StoreIOError
from sunrise.store.codec import decode, encode
from sunrise.store.paths import is_root_key, normalize, to_key

logger = logging.getLogger(__name__)

STORE_FILENAME = ".sunrise"


class AnnotationStore:
    """Descriptions for the subtree governed by *root*.

    Every mutation rewrites the whole backing file before returning.
    """

    def __init__(
        self,
        root: Path,
        store_path: Path,
        descriptions: dict[PurePosixPath, str] | None = None,
    ) -> None:
        self.root = root
        self.store_path = store_path
        self.descriptions: dict[PurePosixPath, str] = dict(descriptions or {})

    # ------------------------------------------------------------------
    # Loading and saving
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, directory: Path) -> AnnotationStore:
        """Read ``directory/.sunrise`` and bind the store to *directory*."""
        store_path = directory / STORE_FILENAME
        try:
            data = store_path.read_bytes()
            root = directory.resolve(strict=True)
        except OSError as e:
            raise StoreIOError(store_path, "read", e) from e

        descriptions = {
            to_key(key): text for key, text in decode(data, store_path).items()
        }
        return cls(root=root, store_path=store_path, descriptions=descriptions)

    def save(self) -> None:
        """Encode every description and overwrite the backing file."""
        data = encode({str(key): text for key, text in self.descriptions.items()})
        try:
            with open(self.store_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StoreIOError(self.store_path, "write", e) from e
        logger.debug("saved %d description(s) to %s", len(self.descriptions), self.store_path)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, path: PurePosixPath | str) -> str | None:
        return self.descriptions.get(to_key(path))

    def known_paths(self) -> list[PurePosixPath]:
        """All annotated paths, sorted."""
        return sorted(self.descriptions)

    def exists(self, path: PurePosixPath | str) -> bool:
        """Whether the annotated path still exists under the root."""
        return (self.root / to_key(path)).exists()

    def relative(
        self,
        target: str | os.PathLike[str],
        *,
        base: Path | None = None,
        strict: bool = True,
    ) -> PurePosixPath:
        """Normalize *target* against this store's root."""
        return normalize(self.root, target, base=base, strict=strict)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, PurePosixPath)):
            return False
        return to_key(path) in self.descriptions

    def __len__(self) -> int:
        return len(self.descriptions)

    def __repr__(self) -> str:
        return f"AnnotationStore(root={self.root!r}, descriptions={len(self)})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set(self, path: PurePosixPath | str, text: str) -> None:
        """Store *text* for *path*; empty text removes the entry."""
        if not text:
            self.remove(path)
            return
        key = to_key(path)
        if is_root_key(key):
            raise PathError("the store root cannot be annotated")
        self.descriptions[key] = text
        self.save()

    def remove(self, path: PurePosixPath | str) -> None:
        """Drop the entry for *path* if present, then save."""
        self.descriptions.pop(to_key(path), None)
        self.save()
