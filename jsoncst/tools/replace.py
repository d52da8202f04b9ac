"""Replace values in JSON text without disturbing anything else.

    replace('{"age": 30}', [{"path": "age", "value": "31"}])
    -> '{"age": 31}'

Patches whose path does not resolve are skipped. Targets must be disjoint:
replacing ``a`` and ``a.b`` in one call raises ``PatchError`` because the
outer splice would invalidate the inner one's offsets.

CLI:
  jsoncst replace config.json --set server.port 8081 --set /debug true --in-place
"""

from __future__ import annotations

import argparse
from typing import Iterable, List, Optional, Tuple

from jsoncst.tools.cst import Node, ParsedDocument, parse_document
from jsoncst.tools import editcli
from jsoncst.tools.patches import (
    PatchInput,
    ReplacePatch,
    apply_splices,
    as_list,
    check_disjoint,
    coerce_replace,
)
from jsoncst.tools.resolve import resolve_path


def replace(text: str, patches: Iterable[PatchInput], document: Optional[ParsedDocument] = None) -> str:
    items = [coerce_replace(p) for p in as_list(patches)]
    if not items:
        return text
    doc = document if document is not None else parse_document(text)

    matches: List[Tuple[Node, ReplacePatch]] = []
    for p in items:
        node = resolve_path(doc.root, p.path, doc.text)
        if node is not None:
            matches.append((node, p))
    matches.sort(key=lambda m: m[0].start, reverse=True)

    check_disjoint([(node, p.path) for node, p in matches])
    return apply_splices(text, ((node.start, node.end, p.value) for node, p in matches))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsoncst replace")
    editcli.add_output_args(ap)
    ap.add_argument(
        "--set",
        nargs=2,
        action="append",
        required=True,
        metavar=("PATH", "VALUE"),
        help="Replace the value at PATH with the JSON literal VALUE (repeatable)",
    )
    args = ap.parse_args(argv)

    patches = [ReplacePatch(path, value) for path, value in args.set]
    return editcli.run_edit(args, lambda text: replace(text, patches))


if __name__ == "__main__":
    raise SystemExit(main())
