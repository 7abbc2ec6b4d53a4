"""Shared test fixtures for sunrise."""

from pathlib import Path

import pytest

from sunrise.config.models import SunriseConfig
from sunrise.store import AnnotationStore, init_store


class ScriptedPrompter:
    """Answers prompts from a fixed list and records every message asked."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.messages: list[str] = []

    def line(self, message: str) -> str:
        self.messages.append(message)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    """Factory for ScriptedPrompter instances."""
    return ScriptedPrompter


@pytest.fixture
def project(tmp_path):
    """A small project tree with an empty store at its root."""
    root = tmp_path.resolve()
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print('hello')")
    (root / "src" / "util.py").write_text("def helper(): pass")
    (root / "README.md").write_text("# Project")
    init_store(root)
    return root


@pytest.fixture
def store(project):
    return AnnotationStore.load(project)


@pytest.fixture
def sample_config():
    return SunriseConfig()
