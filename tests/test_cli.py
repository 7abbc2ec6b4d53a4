"""Tests for the sunrise CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from sunrise.cli import app
from sunrise.config import SunriseConfig, load_config
from sunrise.store import STORE_FILENAME, find_store_file
from sunrise.store.codec import decode, encode

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, tmp_path_factory, monkeypatch):
    """Run every command from tmp_path with an empty HOME."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)


def _write_store(root: Path, descriptions: dict[str, str]) -> None:
    (root / STORE_FILENAME).write_bytes(encode(descriptions))


def _read_store(root: Path) -> dict[str, str]:
    return decode((root / STORE_FILENAME).read_bytes())


# ── init ─────────────────────────────────────────────────────────────


def test_init_creates_store(tmp_path: Path):
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 0
    assert "Initialised" in result.output
    assert _read_store(tmp_path) == {}


def test_init_defaults_to_current_directory(tmp_path: Path):
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    assert (tmp_path / STORE_FILENAME).is_file()


def test_init_twice(tmp_path: Path):
    runner.invoke(app, ["init"])
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0
    assert "already exists." in result.output


# ── print tree (no subcommand) ───────────────────────────────────────


def test_print_current_directory(project: Path, monkeypatch):
    monkeypatch.chdir(project)
    _write_store(project, {"src/main.py": "entry point"})
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "  // entry point" in result.output.splitlines()
    assert "  src/main.py" in result.output.splitlines()


def test_print_directory_argument_inline(project: Path):
    _write_store(project, {"README.md": "docs"})
    result = runner.invoke(app, ["--inline", str(project)])
    assert result.exit_code == 0
    assert "README.md // docs" in result.output.splitlines()


def test_print_directory_before_option(project: Path):
    _write_store(project, {"README.md": "docs"})
    result = runner.invoke(app, [str(project), "-i"])
    assert result.exit_code == 0
    assert "README.md // docs" in result.output.splitlines()


def test_print_verbose(project: Path):
    result = runner.invoke(app, ["-v", str(project)])
    assert result.exit_code == 0
    assert "descriptions: 0" in result.output


def test_print_without_store_fails(tmp_path: Path):
    if find_store_file(tmp_path) is not None:
        pytest.skip("a .sunrise exists above the temp directory")
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert ".sunrise not found" in result.output


# ── interactive ──────────────────────────────────────────────────────


def test_interactive_adds_and_cleans(project: Path):
    _write_store(project, {"gone.txt": "old"})
    # README.md, src, src/main.py, src/util.py, then the stale prompt
    result = runner.invoke(
        app, ["interactive", str(project)], input="docs\n\nentry point\n\n\n"
    )
    assert result.exit_code == 0
    assert _read_store(project) == {"README.md": "docs", "src/main.py": "entry point"}


def test_interactive_nothing_to_do(project: Path):
    result = runner.invoke(app, ["interactive", str(project)], input="\n\n\n\n")
    assert result.exit_code == 0
    assert "Nothing to do :^)" in result.output


# ── edit ─────────────────────────────────────────────────────────────


def test_edit_relative_to_cwd(project: Path, monkeypatch):
    monkeypatch.chdir(project / "src")
    result = runner.invoke(app, ["edit", "main.py"], input="entry point\n")
    assert result.exit_code == 0
    assert _read_store(project) == {"src/main.py": "entry point"}


def test_edit_uses_first_path_only(project: Path, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(app, ["edit", "README.md", "src/main.py"], input="docs\n")
    assert result.exit_code == 0
    assert _read_store(project) == {"README.md": "docs"}


def test_edit_requires_a_path():
    result = runner.invoke(app, ["edit"])
    assert result.exit_code != 0


def test_edit_missing_file(project: Path, monkeypatch):
    monkeypatch.chdir(project)
    result = runner.invoke(app, ["edit", "nope.py"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "does not exist" in result.output


# ── review ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("d\n", {}),
        ("\n", {"README.md": "docs"}),
        ("the readme\n", {"README.md": "the readme"}),
    ],
)
def test_review_decisions(project: Path, answer: str, expected: dict[str, str]):
    _write_store(project, {"README.md": "docs"})
    result = runner.invoke(app, ["review", str(project)], input=answer)
    assert result.exit_code == 0
    assert "Current Description: docs" in result.output
    assert _read_store(project) == expected


# ── status ───────────────────────────────────────────────────────────


def test_status_reports_drift(project: Path):
    _write_store(project, {"gone.txt": "old"})
    result = runner.invoke(app, ["status", str(project)])
    assert result.exit_code == 0
    assert "gone.txt" in result.output


def test_status_fail_on_drift(project: Path):
    _write_store(project, {"gone.txt": "old"})
    result = runner.invoke(app, ["status", "--fail-on-drift", str(project)])
    assert result.exit_code == 1


def test_status_fail_on_drift_clean(project: Path):
    _write_store(project, {
        "README.md": "docs", "src": "s", "src/main.py": "m", "src/util.py": "u",
    })
    result = runner.invoke(app, ["status", "--fail-on-drift", str(project)])
    assert result.exit_code == 0


# ── config ───────────────────────────────────────────────────────────


def test_config_option_changes_rendering(project: Path, tmp_path: Path):
    cfg = tmp_path / "custom.yaml"
    cfg.write_text("render:\n  marker: '#'\n  indent: 4\n")
    _write_store(project, {"src/main.py": "entry point"})
    result = runner.invoke(app, ["-c", str(cfg), str(project)])
    assert result.exit_code == 0
    assert "    # entry point" in result.output.splitlines()


def test_invalid_config_fails(project: Path, tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("render:\n  indent: -1\n")
    result = runner.invoke(app, ["--config", str(cfg), str(project)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_project_local_config_picked_up(project: Path, tmp_path: Path):
    (tmp_path / "sunrise.yaml").write_text("render:\n  inline: true\n")
    _write_store(project, {"README.md": "docs"})
    result = runner.invoke(app, [str(project)])
    assert result.exit_code == 0
    assert "README.md // docs" in result.output.splitlines()


# ── config init ──────────────────────────────────────────────────────


def test_config_init_writes_loadable_template(tmp_path: Path):
    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 0
    assert "Created" in result.output
    assert load_config(str(tmp_path / "sunrise.yaml")) == SunriseConfig()


def test_config_init_refuses_to_overwrite(tmp_path: Path):
    (tmp_path / "sunrise.yaml").write_text("render:\n  indent: 8\n")
    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 1
    assert "already exists" in result.output
    assert "indent: 8" in (tmp_path / "sunrise.yaml").read_text()


def test_config_init_force(tmp_path: Path):
    (tmp_path / "sunrise.yaml").write_text("render:\n  indent: 8\n")
    result = runner.invoke(app, ["config", "init", "--force"])
    assert result.exit_code == 0
    assert load_config(str(tmp_path / "sunrise.yaml")).render.indent == 2
