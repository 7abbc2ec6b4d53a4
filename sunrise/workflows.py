"""User-facing flows built on the store, the synchronizer and the renderer."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.markup import escape

from sunrise.config.models import SunriseConfig
from sunrise.console import console
from sunrise.errors import MissingPathError, PathError
from sunrise.prompt import Prompter, ReviewAction, ask, parse_review_decision
from sunrise.store.locator import InitResult, init_store, locate
from sunrise.store.paths import is_root_key
from sunrise.tree.renderer import render
from sunrise.tree.sync import DriftReport, clean, discover, drift, live_paths

logger = logging.getLogger(__name__)


def init(directory: Path) -> InitResult:
    """Create the store file in *directory*, or report that it exists."""
    result = init_store(directory)
    if result.created:
        console.print(f"Initialised {escape(str(result.path))}")
    else:
        console.print(f"{escape(str(result.path))} already exists.")
    return result


def show(
    directory: Path,
    config: SunriseConfig,
    *,
    inline: bool = False,
    verbose: bool = False,
) -> None:
    """Print the annotated tree below *directory*."""
    store = locate(directory, verbose=verbose)
    paths = live_paths(store, directory, config.walker)
    lines = render(
        store.descriptions,
        paths,
        inline=inline or config.render.inline,
        indent=config.render.indent,
        marker=config.render.marker,
    )
    for line in lines:
        console.print(line)


def interactive(
    directory: Path,
    prompter: Prompter,
    config: SunriseConfig,
    *,
    verbose: bool = False,
) -> bool:
    """Describe new paths, then clean up stale ones. Returns True if anything changed."""
    store = locate(directory, verbose=verbose)

    # every live path is offered before any stale entry is considered
    paths = live_paths(store, directory, config.walker)
    added = discover(store, paths, prompter)
    removed = clean(store, prompter)

    changed = added or removed
    if not changed:
        console.print("Nothing to do :^)")
    return changed


def edit(
    target: Path,
    base: Path,
    prompter: Prompter,
    *,
    verbose: bool = False,
) -> bool:
    """Replace the description of a single path.

    Empty input leaves the store untouched. Returns True if it changed.
    """
    full = target if target.is_absolute() else base / target
    if not full.exists():
        raise MissingPathError(f"{target} does not exist.")

    store = locate(full if full.is_dir() else full.parent, verbose=verbose)
    key = store.relative(full)
    if is_root_key(key):
        raise PathError(f"{target} is the store root and cannot be described")

    previous = store.get(key)
    if previous is not None:
        console.print(f"Previous description: {escape(previous)}")

    text = prompter.line(f"{key}: Enter a new description: ")
    if not text:
        logger.debug("edit of %s left unchanged", key)
        return False
    store.set(key, text)
    return True


def review(
    directory: Path,
    prompter: Prompter,
    *,
    verbose: bool = False,
) -> bool:
    """Walk through every description: update, skip or delete each one."""
    store = locate(directory, verbose=verbose)
    changed = False

    for path in store.known_paths():
        console.print(f"[bold]{escape(str(path))}[/bold]")
        console.print(f"Current Description: {escape(store.get(path) or '')}")

        decision = ask(
            prompter,
            "Add a description, press enter to ignore or 'd' to delete: ",
            parse_review_decision,
        )
        if decision.action is ReviewAction.UPDATE:
            store.set(path, decision.text)
            changed = True
        elif decision.action is ReviewAction.DELETE:
            store.remove(path)
            changed = True
    return changed


def status(
    directory: Path,
    config: SunriseConfig,
    *,
    verbose: bool = False,
) -> DriftReport:
    """Report new and stale paths without changing anything."""
    store = locate(directory, verbose=verbose)
    report = drift(store, live_paths(store, directory, config.walker))

    for path in report.new:
        console.print(f"[green]new[/green]    {escape(path)}")
    for path in report.stale:
        console.print(f"[red]stale[/red]  {escape(path)}")
    if report.has_drift:
        console.print(
            f"\n{len(report.new)} new, {len(report.stale)} stale "
            f"({report.total_described} described, {report.total_live} on disk)"
        )
    else:
        console.print("[green]Everything is described and up to date.[/green]")
    return report
