"""Indented tree view of the walked paths with their descriptions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath

from rich.text import Text

DESCRIPTION_STYLE = "bold"


def render(
    descriptions: Mapping[PurePosixPath, str],
    paths: Iterable[PurePosixPath],
    *,
    inline: bool = False,
    indent: int = 2,
    marker: str = "//",
) -> list[Text]:
    """Render *paths* in the given order, one entry line each.

    Nesting depth comes from the number of path components, so the order of
    *paths* is the display order. A description goes on its own line above
    the entry, or after the entry when *inline* is set.
    """
    lines: list[Text] = []
    for path in paths:
        depth = max(len(path.parts) - 1, 0)
        pad = " " * (indent * depth)
        description = descriptions.get(path)

        if description is None:
            lines.append(Text(f"{pad}{path}"))
        elif inline:
            lines.append(Text.assemble(
                f"{pad}{path} {marker} ",
                (description, DESCRIPTION_STYLE),
            ))
        else:
            lines.append(Text.assemble(f"{pad}{marker} ", (description, DESCRIPTION_STYLE)))
            lines.append(Text(f"{pad}{path}"))
    return lines
