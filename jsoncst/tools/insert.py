"""Insert object properties and array elements into JSON text.

    insert('{"name": "Alice"}', [{"path": "", "key": "age", "value": "30"}])
    -> '{"name": "Alice", "age": 30}'

    insert('{"items": [1, 3]}', [{"path": "items", "position": 1, "value": "2"}])
    -> '{"items": [1, 2, 3]}'

``path`` addresses the container. Paths that do not resolve, or that resolve
to a scalar, are skipped.

Each insert is a zero-width splice into the original text. Splices are
applied from the rightmost offset to the leftmost; inserts landing on the
same offset are applied in reverse input order so they end up in input
order. This makes several inserts into one container safe within a call.

CLI:
  jsoncst insert config.json "" '"v2"' --key version --in-place
  jsoncst insert config.json plugins '"lint"' --position 0
"""

from __future__ import annotations

import argparse
from typing import Dict, Iterable, List, Optional, Set, Tuple

from jsoncst.tools.cst import ArrayNode, ObjectNode, ParsedDocument, parse_document
from jsoncst.tools import editcli
from jsoncst.tools.patches import (
    InsertPatch,
    PatchError,
    PatchInput,
    apply_splices,
    as_list,
    coerce_insert,
)
from jsoncst.tools.pointer import format_path
from jsoncst.tools.resolve import key_text, resolve_path

# (offset, input order, text)
_Splice = Tuple[int, int, str]


def _object_splice(obj: ObjectNode, p: InsertPatch, source: str, added: Set[str]) -> Tuple[int, str]:
    if not p.key:
        raise PatchError("insert into object requires key", format_path(p.path))
    existing = {key_text(prop.key, source) for prop in obj.properties}
    if p.key in existing or p.key in added:
        raise PatchError(f"key already exists: {p.key!r}", format_path(p.path))
    first_into_empty = not obj.properties and not added
    added.add(p.key)

    entry = f'"{p.key}": {p.value}'
    if first_into_empty:
        return obj.start + 1, entry
    if not obj.properties:
        return obj.start + 1, ", " + entry
    return obj.properties[-1].value.end, ", " + entry


def _array_splice(arr: ArrayNode, p: InsertPatch, earlier: int) -> Tuple[int, str]:
    n = len(arr.elements)
    position = n if p.position is None else p.position
    if position < 0 or position > n:
        raise PatchError(f"invalid position {position} for array of length {n}", format_path(p.path))

    if n == 0:
        # later inserts into the same empty array follow the first one
        return arr.start + 1, p.value if earlier == 0 else ", " + p.value
    if position >= n:
        return arr.elements[-1].end, ", " + p.value
    return arr.elements[position].start, p.value + ", "


def insert(text: str, patches: Iterable[PatchInput], document: Optional[ParsedDocument] = None) -> str:
    items = [coerce_insert(p) for p in as_list(patches)]
    if not items:
        return text
    doc = document if document is not None else parse_document(text)

    # per container, keyed by its start offset
    added_keys: Dict[int, Set[str]] = {}
    array_hits: Dict[int, int] = {}
    splices: List[_Splice] = []
    for order, p in enumerate(items):
        node = resolve_path(doc.root, p.path, doc.text)
        if isinstance(node, ObjectNode):
            offset, snippet = _object_splice(node, p, doc.text, added_keys.setdefault(node.start, set()))
        elif isinstance(node, ArrayNode):
            offset, snippet = _array_splice(node, p, array_hits.get(node.start, 0))
            array_hits[node.start] = array_hits.get(node.start, 0) + 1
        else:
            continue
        splices.append((offset, order, snippet))

    splices.sort(key=lambda s: (s[0], s[1]), reverse=True)
    return apply_splices(text, ((offset, offset, snippet) for offset, _, snippet in splices))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsoncst insert")
    editcli.add_output_args(ap)
    ap.add_argument("target", help="Path of the object or array to insert into")
    ap.add_argument("value", help="JSON literal to insert")
    ap.add_argument("--key", help="Property name (objects)")
    ap.add_argument("--position", type=int, help="Element index (arrays, default: append)")
    args = ap.parse_args(argv)

    patch = InsertPatch(args.target, args.value, key=args.key, position=args.position)
    return editcli.run_edit(args, lambda text: insert(text, [patch]))


if __name__ == "__main__":
    raise SystemExit(main())
