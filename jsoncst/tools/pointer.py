"""Path expressions: JSON Pointer (RFC 6901) and dot notation.

Both syntaxes turn into the same list of steps: ``str`` steps look up an
object key, ``int`` steps index into an array.

- ``/a/b/0``       -> ["a", "b", 0]   (``~1`` is ``/``, ``~0`` is ``~``)
- ``a.b[0]``       -> ["a", "b", 0]
- ``""`` and ``/`` -> []              (the document root)

Numeric pointer segments always become indices; a numeric key on an object
therefore cannot be addressed through a pointer.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Union

Step = Union[str, int]
PathLike = Union[str, Sequence[Step]]

_INDEX_RE = re.compile(r"[0-9]+")


def escape_segment(seg: str) -> str:
    return seg.replace("~", "~0").replace("/", "~1")


def unescape_segment(seg: str) -> str:
    return seg.replace("~1", "/").replace("~0", "~")


def _step(seg: str) -> Step:
    return int(seg) if _INDEX_RE.fullmatch(seg) else seg


def split_pointer(pointer: str) -> List[Step]:
    if pointer in ("", "/"):
        return []
    if not pointer.startswith("/"):
        raise ValueError(f"Invalid JSON pointer (must start with '/'): {pointer}")
    return [_step(unescape_segment(p)) for p in pointer[1:].split("/")]


def join_pointer(segments: Sequence[Step]) -> str:
    if not segments:
        return ""
    return "/" + "/".join(escape_segment(str(s)) for s in segments)


def parse_dot_path(path: str) -> List[Step]:
    steps: List[Step] = []
    i, n = 0, len(path)
    while i < n:
        ch = path[i]
        if ch == ".":
            i += 1
            continue
        if ch == "[":
            close = path.find("]", i + 1)
            if close == -1:
                close = n
            steps.append(_step(path[i + 1 : close]))
            i = close + 1
            continue
        j = i
        while j < n and path[j] not in ".[":
            j += 1
        steps.append(path[i:j])
        i = j
    return steps


def parse_path(path: PathLike) -> List[Step]:
    """Normalize any accepted path form into a list of steps."""
    if isinstance(path, str):
        if path.startswith("/"):
            return split_pointer(path)
        return parse_dot_path(path)
    if isinstance(path, (list, tuple)):
        return list(path)
    raise TypeError(f"path must be a string or a sequence of steps, got {type(path).__name__}")


def format_path(path: PathLike) -> str:
    """Render a path for error messages."""
    if isinstance(path, str):
        return path
    return join_pointer(list(path))
