"""YAML config loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import SunriseConfig

CONFIG_FILENAME = "sunrise.yaml"


def load_config(cli_path: str | None = None) -> SunriseConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".sunrise" / "config.yaml",
    ]

    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_paths:
        if path and path.is_file():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                return SunriseConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return SunriseConfig()


# Default YAML template, documents every key
DEFAULT_CONFIG_TEMPLATE = """\
# sunrise.yaml

# Directory walking
walker:
  ignore_patterns:             # path components that are always skipped
    - .git
    - node_modules
    - __pycache__
    - .venv
    - build
    - dist
    - .tox
  include_hidden: false        # show dotfiles and dot-directories
  respect_gitignore: true      # skip entries matched by .gitignore files

# Tree rendering
render:
  indent: 2                    # spaces per nesting level
  marker: "//"                 # separator placed before descriptions
  inline: false                # descriptions on the same line as the path

# Logging
log_level: "warn"              # debug | info | warn | error
"""
