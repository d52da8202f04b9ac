"""Patch value objects and the splicing primitives shared by the editors.

A patch is an immutable request: replace the value at a path, insert into
the container at a path, or delete the member at a path. ``value`` is always
JSON literal *text* (``'"Bob"'``, ``'31'``, ``'{"a": 1}'``); it is spliced in
verbatim and never validated here.

Editors apply their splices right to left (descending start offset), so a
splice never shifts the offsets of the splices still to come.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from jsoncst.tools.cst import Node
from jsoncst.tools.pointer import PathLike, format_path


@dataclass
class PatchError(Exception):
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (path: {self.path!r})"


@dataclass(frozen=True)
class ReplacePatch:
    path: PathLike
    value: str


@dataclass(frozen=True)
class InsertPatch:
    path: PathLike
    value: str
    key: Optional[str] = None
    position: Optional[int] = None


@dataclass(frozen=True)
class DeletePatch:
    path: PathLike


Patch = Union[ReplacePatch, InsertPatch, DeletePatch]
PatchInput = Union[Patch, Mapping[str, Any]]


def _field(raw: Mapping[str, Any], name: str, op: str) -> Any:
    if not isinstance(raw, Mapping):
        raise PatchError(f"{op} patch must be a mapping, got {type(raw).__name__}")
    if name not in raw or raw[name] is None:
        raise PatchError(f"{op} patch requires '{name}'", _label(raw.get("path")))
    return raw[name]


def _label(path: Any) -> Optional[str]:
    if path is None:
        return None
    if isinstance(path, (str, list, tuple)):
        return format_path(path)
    return repr(path)


def _check_path(path: Any, op: str) -> PathLike:
    if not isinstance(path, (str, list, tuple)):
        raise PatchError(f"{op} patch requires 'path' as a string or list of steps", _label(path))
    return path


def _check_value(value: Any, op: str, path: PathLike) -> str:
    if not isinstance(value, str):
        raise PatchError(
            f"{op} patch 'value' must be JSON literal text, got {type(value).__name__}",
            format_path(path),
        )
    return value


def coerce_replace(p: PatchInput) -> ReplacePatch:
    if isinstance(p, ReplacePatch):
        return p
    path = _check_path(_field(p, "path", "replace"), "replace")
    value = _check_value(_field(p, "value", "replace"), "replace", path)
    return ReplacePatch(path, value)


def coerce_insert(p: PatchInput) -> InsertPatch:
    if isinstance(p, InsertPatch):
        return p
    path = _check_path(_field(p, "path", "insert"), "insert")
    value = _check_value(_field(p, "value", "insert"), "insert", path)
    key = p.get("key")
    position = p.get("position")
    if key is not None and not isinstance(key, str):
        raise PatchError("insert patch 'key' must be a string", format_path(path))
    if position is not None and (not isinstance(position, int) or isinstance(position, bool)):
        raise PatchError("insert patch 'position' must be an integer", format_path(path))
    return InsertPatch(path, value, key=key, position=position)


def coerce_delete(p: PatchInput) -> DeletePatch:
    if isinstance(p, DeletePatch):
        return p
    return DeletePatch(_check_path(_field(p, "path", "delete"), "delete"))


def check_disjoint(targets: Sequence[Tuple[Node, PathLike]]) -> None:
    """Reject targets whose spans overlap or nest.

    ``targets`` must already be sorted by descending start offset.
    """
    boundary = float("inf")
    for node, path in targets:
        if node.end > boundary:
            raise PatchError("patch conflict: target overlaps another patch", format_path(path))
        boundary = node.start


def splice(text: str, start: int, end: int, replacement: str) -> str:
    return text[:start] + replacement + text[end:]


def apply_splices(text: str, splices: Iterable[Tuple[int, int, str]]) -> str:
    """Apply (start, end, replacement) splices given in right-to-left order."""
    out = text
    for start, end, replacement in splices:
        out = splice(out, start, end, replacement)
    return out


def as_list(patches: Iterable[PatchInput]) -> List[PatchInput]:
    if isinstance(patches, (str, bytes, Mapping)):
        raise PatchError("patches must be a list of patch objects")
    return list(patches)
