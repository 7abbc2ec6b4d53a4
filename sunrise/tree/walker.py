"""Depth-first directory walk that honours ignore patterns and .gitignore files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import Path

from sunrise.config.models import WalkerConfig
from sunrise.errors import PathError
from sunrise.store.store import STORE_FILENAME

logger = logging.getLogger(__name__)

GITIGNORE = ".gitignore"


@dataclass(frozen=True)
class IgnoreRule:
    """One pattern line from a .gitignore file."""

    pattern: str
    base: Path
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False

    def matches(self, path: Path, is_dir: bool) -> bool:
        if self.dir_only and not is_dir:
            return False
        if self.anchored:
            try:
                rel = path.relative_to(self.base)
            except ValueError:
                return False
            return _match_segments(self.pattern.split("/"), list(rel.parts))
        return fnmatch(path.name, self.pattern)


def _match_segments(pattern: list[str], parts: list[str]) -> bool:
    """Match path components against pattern components.

    Wildcards never cross a ``/``. A ``**`` component matches zero or more
    directories, or one or more entries when it ends the pattern.
    """
    if not pattern:
        return not parts
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        if not rest:
            return bool(parts)
        return any(_match_segments(rest, parts[i:]) for i in range(len(parts) + 1))
    if not parts or not fnmatch(parts[0], head):
        return False
    return _match_segments(rest, parts[1:])


def parse_gitignore(text: str, base: Path) -> list[IgnoreRule]:
    """Parse .gitignore lines into rules.

    Supports comments, ``!`` negation, trailing ``/`` for directories and
    anchoring on a leading or inner ``/``. ``**/`` prefixes are treated as
    unanchored patterns.
    """
    rules: list[IgnoreRule] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        negated = line.startswith("!")
        if negated:
            line = line[1:]
        dir_only = line.endswith("/")
        line = line.rstrip("/")
        while line.startswith("**/"):
            line = line[3:]
        anchored = "/" in line
        line = line.lstrip("/")
        if not line:
            continue
        rules.append(IgnoreRule(
            pattern=line,
            base=base,
            negated=negated,
            dir_only=dir_only,
            anchored=anchored,
        ))
    return rules


def _read_rules(directory: Path) -> list[IgnoreRule]:
    gitignore = directory / GITIGNORE
    if not gitignore.is_file():
        return []
    try:
        return parse_gitignore(gitignore.read_text(encoding="utf-8", errors="replace"), directory)
    except OSError as e:
        logger.warning("could not read %s: %s", gitignore, e)
        return []


def _is_ignored(path: Path, is_dir: bool, rules: list[IgnoreRule]) -> bool:
    """Last matching rule wins, as in git."""
    ignored = False
    for rule in rules:
        if rule.matches(path, is_dir):
            ignored = not rule.negated
    return ignored


class Walker:
    """Yields the entries under a directory, depth-first.

    Each directory is yielded before its children; siblings are sorted by
    name. Symlinked directories are yielded but not descended into. The
    store file itself is never yielded.
    """

    def __init__(self, config: WalkerConfig | None = None) -> None:
        self.config = config or WalkerConfig()

    def walk(self, directory: Path) -> Iterator[Path]:
        directory = Path(os.path.abspath(directory))
        if not directory.is_dir():
            raise PathError(f"{directory} is not a directory")
        rules = self._inherited_rules(directory) if self.config.respect_gitignore else []
        yield from self._walk(directory, rules)

    def _inherited_rules(self, directory: Path) -> list[IgnoreRule]:
        """Rules from .gitignore files above *directory*, up to the repository root."""
        if (directory / ".git").exists():
            return []
        ancestors: list[Path] = []
        for parent in directory.parents:
            ancestors.append(parent)
            if (parent / ".git").exists():
                break
        else:
            # not inside a repository: only the walked subtree's files apply
            return []
        rules: list[IgnoreRule] = []
        for parent in reversed(ancestors):
            rules.extend(_read_rules(parent))
        return rules

    def _skip_name(self, name: str) -> bool:
        if name == STORE_FILENAME:
            return True
        if not self.config.include_hidden and name.startswith("."):
            return True
        return any(fnmatch(name, pattern) for pattern in self.config.ignore_patterns)

    def _walk(self, directory: Path, rules: list[IgnoreRule]) -> Iterator[Path]:
        if self.config.respect_gitignore:
            rules = rules + _read_rules(directory)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.warning("skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            if self._skip_name(entry.name):
                continue
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if rules and _is_ignored(path, is_dir, rules):
                continue
            yield path
            if is_dir:
                yield from self._walk(path, rules)


def walk(directory: Path, config: WalkerConfig | None = None) -> Iterator[Path]:
    """Convenience wrapper around Walker.walk()."""
    return Walker(config).walk(directory)
