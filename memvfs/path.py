"""Path manipulation helpers."""

from __future__ import annotations


def canonicalize(path: str) -> str:
    """Return *path* with ``.``, ``..`` and repeated slashes resolved.

    Relative paths stay relative; ``..`` never climbs above the start.
    """
    is_absolute = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts:
                parts.pop()
        else:
            parts.append(part)
    joined = "/".join(parts)
    return "/" + joined if is_absolute else joined