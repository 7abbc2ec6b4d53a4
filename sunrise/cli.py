"""CLI entry point for sunrise."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, NoReturn, TypeVar

import typer
from rich.markup import escape
from typer.core import TyperGroup

from sunrise import workflows
from sunrise.config import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE, SunriseConfig, load_config
from sunrise.console import console, err_console
from sunrise.errors import SunriseError
from sunrise.prompt import Prompter, TerminalPrompter

T = TypeVar("T")

# Options of the top-level group that take a value
_VALUE_OPTIONS = {"--config", "-c"}


class _TreeGroup(TyperGroup):
    """Group that treats a positional argument which is not a command as the DIRECTORY to print."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        rest = list(args)
        i = 0
        while i < len(rest):
            arg = rest[i]
            if arg == "--":
                break
            if arg.startswith("-"):
                i += 2 if arg in _VALUE_OPTIONS else 1
                continue
            if arg not in self.commands:
                ctx.meta["directory"] = arg
                del rest[i]
            break
        return super().parse_args(ctx, rest)


app = typer.Typer(
    name="sunrise",
    cls=_TreeGroup,
    help="Describe the files of a project and print an annotated tree.",
)

config_app = typer.Typer(help="Manage sunrise configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: SunriseConfig | None = None
_verbose: bool = False
_prompter: Prompter = TerminalPrompter()


def _get_config() -> SunriseConfig:
    if _config is None:
        return load_config()
    return _config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(1)


def _run(func: Callable[..., T], *args, **kwargs) -> T:
    """Call a workflow, turning sunrise errors into an error message and exit code 1."""
    try:
        return func(*args, **kwargs)
    except SunriseError as e:
        _fail(e)


def _directory_or_current(directory: Path | None) -> Path:
    return directory if directory is not None else Path.cwd()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    inline: Annotated[
        bool, typer.Option("--inline", "-i", help="Print descriptions on the same line as paths")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Print store diagnostics and debug logs")
    ] = False,
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to sunrise.yaml")
    ] = None,
) -> None:
    """Print the annotated tree of DIRECTORY (default: current directory)."""
    global _config, _verbose
    try:
        _config = load_config(config)
    except ValueError as e:
        _fail(e)
    _verbose = verbose
    _setup_logging("debug" if verbose else _config.log_level)

    if ctx.invoked_subcommand is None:
        raw = ctx.meta.get("directory")
        directory = _directory_or_current(Path(raw) if raw else None)
        _run(workflows.show, directory, _get_config(), inline=inline, verbose=verbose)


@app.command()
def init(
    directory: Annotated[
        Path | None, typer.Argument(help="Directory to create .sunrise in")
    ] = None,
) -> None:
    """Create an empty .sunrise file."""
    _run(workflows.init, _directory_or_current(directory))


@app.command()
def interactive(
    directory: Annotated[Path | None, typer.Argument(help="Directory to scan")] = None,
) -> None:
    """Describe new files, then offer to remove descriptions of deleted ones."""
    _run(
        workflows.interactive,
        _directory_or_current(directory),
        _prompter,
        _get_config(),
        verbose=_verbose,
    )


@app.command()
def edit(
    paths: Annotated[list[Path], typer.Argument(help="Path to describe (only the first is used)")],
) -> None:
    """Change the description of a single path."""
    _run(workflows.edit, paths[0], Path.cwd(), _prompter, verbose=_verbose)


@app.command()
def review(
    directory: Annotated[Path | None, typer.Argument(help="Directory whose store to review")] = None,
) -> None:
    """Update, keep or delete every existing description."""
    _run(workflows.review, _directory_or_current(directory), _prompter, verbose=_verbose)


@app.command()
def status(
    directory: Annotated[Path | None, typer.Argument(help="Directory to check")] = None,
    fail_on_drift: Annotated[
        bool, typer.Option("--fail-on-drift", help="Exit 1 if new or stale paths are found")
    ] = False,
) -> None:
    """List undescribed and stale paths without prompting."""
    report = _run(
        workflows.status,
        _directory_or_current(directory),
        _get_config(),
        verbose=_verbose,
    )
    if fail_on_drift and report.has_drift:
        raise typer.Exit(code=1)


@config_app.command("init")
def config_init(
    force: Annotated[bool, typer.Option("--force", help="Overwrite existing config")] = False,
) -> None:
    """Create a default sunrise.yaml in the current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        console.print(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    console.print(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
