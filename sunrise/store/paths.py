"""Canonical root-relative path keys."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

from sunrise.errors import MissingPathError, PathError, UnrelatedPathError

ROOT_KEY = PurePosixPath(".")


def is_root_key(key: PurePosixPath) -> bool:
    """True for the empty path, which denotes the root itself."""
    return not key.parts


def to_key(value: str | os.PathLike[str]) -> PurePosixPath:
    """Coerce a stored key (native or POSIX separators) to a PurePosixPath."""
    text = os.fspath(value)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    return PurePosixPath(text)


def normalize(
    root: Path,
    target: str | os.PathLike[str],
    *,
    base: Path | None = None,
    strict: bool = True,
) -> PurePosixPath:
    """Express *target* as a canonical path relative to *root*.

    Relative targets are joined to *base*. With ``strict`` the target must
    exist; without it, missing trailing components are kept as given (used
    when looking up a path that has already been deleted).

    Raises MissingPathError when the target does not canonicalize and
    UnrelatedPathError when it cannot be related to *root*.
    """
    path = Path(target)
    if not path.is_absolute():
        if base is None:
            raise PathError(f"{path} is relative and no base directory was given")
        path = base / path

    try:
        canonical = path.resolve(strict=strict)
    except FileNotFoundError as e:
        raise MissingPathError(f"{target} does not exist.") from e
    except (OSError, RuntimeError) as e:
        # symlink loops surface as RuntimeError on older interpreters
        raise MissingPathError(f"{target} does not canonicalize: {e}") from e

    try:
        relative = os.path.relpath(canonical, root)
    except ValueError as e:
        raise UnrelatedPathError(f"{target} is on a different drive than {root}") from e

    key = to_key(relative)
    if key.parts and key.parts[0] == "..":
        raise UnrelatedPathError(f"{target} is outside {root}")
    return key
