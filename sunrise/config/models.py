from pydantic import BaseModel, Field
from typing import Literal


class WalkerConfig(BaseModel):
    ignore_patterns: list[str] = Field(default_factory=lambda: [
        ".git", "node_modules", "__pycache__", ".venv", "build", "dist", ".tox"
    ])
    include_hidden: bool = False
    respect_gitignore: bool = True


class RenderConfig(BaseModel):
    indent: int = Field(default=2, ge=0)
    marker: str = "//"
    inline: bool = False


class SunriseConfig(BaseModel):
    walker: WalkerConfig = Field(default_factory=WalkerConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
