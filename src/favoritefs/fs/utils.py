"""Path and node-handle utilities."""

from __future__ import annotations

import posixpath


def normalize_path(path: str) -> str:
    """Return the canonical form under which node paths are stored.

    Paths are absolute, use single separators, contain no ``.`` or ``..``
    segments and carry no trailing slash; an empty path is the root.
    ``"/alice//notes.md/"`` and ``"alice/./notes.md"`` both become
    ``"/alice/notes.md"``.
    """
    if not path:
        return "/"

    path = path.strip()

    if not path.startswith("/"):
        path = "/" + path

    path = posixpath.normpath(path)

    # posixpath keeps a leading double slash
    if path.startswith("//"):
        path = "/" + path.lstrip("/")

    if path != "/" and path.endswith("/"):
        path = path[:-1]

    return path


def node_id_from_handle(handle: int | float) -> int:
    """Convert an externally supplied numeric node handle to a node id.

    Handles arrive as JSON numbers, so ``3.0`` is accepted as ``3``.
    Booleans and non-integral floats are rejected.
    """
    if isinstance(handle, bool):
        raise ValueError(f"Invalid node handle: {handle!r}")
    if isinstance(handle, float):
        if not handle.is_integer():
            raise ValueError(f"Invalid node handle: {handle!r}")
        return int(handle)
    if isinstance(handle, int):
        return handle
    raise ValueError(f"Invalid node handle: {handle!r}")
