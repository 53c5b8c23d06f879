"""Path helpers and lookup of texture files named in a scene."""

from __future__ import annotations

import os

from raycub.state import SceneError


def dirname(path: str) -> str:
    """Return the directory part of ``path`` with its trailing '/', or '.'."""
    if not path:
        return "."
    cut = path.rfind("/")
    if cut < 0:
        return "."
    return path[: cut + 1]


def path_join(directory: str, name: str) -> str:
    """Join ``directory`` and ``name`` with a single '/' between them."""
    return f"{directory}/{name}"


def path_parent(directory: str) -> str:
    """Return the parent of ``directory`` as '<directory>/..'."""
    return path_join(directory, "..")


def file_exists(path: str) -> bool:
    """Tell whether ``path`` can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def texture_candidates(original: str, map_dir: str) -> list[str]:
    """List the places a texture path is looked for, in order."""
    candidates = [original]
    if not original.startswith("/"):
        candidates.append(path_join(map_dir, original))
        candidates.append(path_join(path_parent(map_dir), original))
    return candidates


def resolve_texture(original: str, map_dir: str) -> str:
    """Return the first readable candidate for a texture path."""
    for candidate in texture_candidates(original, map_dir):
        if file_exists(candidate):
            return candidate
    raise SceneError(f"texture not found: {original}")