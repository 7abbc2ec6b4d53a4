"""YAML encoding of the path -> description mapping."""

from __future__ import annotations

import datetime
import logging
from pathlib import Path, PurePosixPath

import yaml

from sunrise.errors import StoreEncodeError, StoreFormatError

logger = logging.getLogger(__name__)

# YAML resolves hand-typed timestamps to date or datetime
_SCALARS = (str, int, float, bool, datetime.date)


def encode(descriptions: dict[str, str]) -> bytes:
    """Serialize descriptions as YAML with keys sorted."""
    try:
        text = yaml.safe_dump(
            dict(descriptions),
            sort_keys=True,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as e:
        raise StoreEncodeError(f"could not encode descriptions: {e}") from e
    return text.encode("utf-8")


def decode(data: bytes, path: Path | None = None) -> dict[str, str]:
    """Parse YAML bytes into a path -> description mapping.

    An empty document is an empty mapping. Scalar keys and values are
    coerced to strings; empty values are dropped.
    """
    try:
        raw = yaml.safe_load(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise StoreFormatError(path, f"not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise StoreFormatError(path, f"invalid YAML: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise StoreFormatError(path, f"expected a mapping, got {type(raw).__name__}")

    descriptions: dict[str, str] = {}
    for key, value in raw.items():
        if not isinstance(key, _SCALARS) or not isinstance(value, (*_SCALARS, type(None))):
            raise StoreFormatError(path, f"entry {key!r} is not a path: description pair")
        key_path = PurePosixPath(str(key))
        if key_path.is_absolute() or ".." in key_path.parts:
            raise StoreFormatError(path, f"entry {key!r} must be relative to the store root")
        text = "" if value is None else str(value)
        if not text:
            logger.warning("dropping empty description for %s", key)
            continue
        descriptions[str(key)] = text
    return descriptions
