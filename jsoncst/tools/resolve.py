"""Path resolution over the concrete syntax tree.

Resolves a path (see ``jsoncst.tools.pointer``) to the node it addresses.
A path that does not exist resolves to ``None``; that is a normal outcome,
not an error.

Object keys are compared after unescaping the simple JSON escapes only.
``\\uXXXX`` sequences are left as written, so ``"caf\\u00e9"`` does not match
``café``.

CLI:
  jsoncst get config.json server.port
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from jsoncst.tools.cst import ArrayNode, Node, ObjectNode, ParseError, StringNode, parse
from jsoncst.tools.pointer import PathLike, Step, parse_path
from jsoncst.tools.textpos import describe_error
from jsoncst.tools.tokenizer import LexError

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def unescape_key(raw: str) -> str:
    out: List[str] = []
    i, n = 0, len(raw)
    while i < n:
        ch = raw[i]
        if ch == "\\" and i + 1 < n:
            esc = raw[i + 1]
            out.append(_SIMPLE_ESCAPES.get(esc, ch + esc))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def key_text(key: StringNode, source: str) -> str:
    """The unescaped text of a property key (without the quotes)."""
    return unescape_key(source[key.start + 1 : key.end - 1])


@dataclass(frozen=True)
class Member:
    """A node together with the container holding it."""

    container: Union[ObjectNode, ArrayNode]
    index: int
    node: Node


def _lookup(node: Node, step: Step, source: str) -> Optional[Member]:
    if isinstance(node, ObjectNode):
        if not isinstance(step, str):
            return None
        for i, prop in enumerate(node.properties):
            if key_text(prop.key, source) == step:
                return Member(node, i, prop.value)
        return None
    if isinstance(node, ArrayNode):
        # bool is an int subclass but never a valid index
        if not isinstance(step, int) or isinstance(step, bool):
            return None
        if 0 <= step < len(node.elements):
            return Member(node, step, node.elements[step])
        return None
    return None


def resolve_member(root: Node, path: PathLike, source: str) -> Optional[Member]:
    """Resolve ``path`` to its containing member; the root has none."""
    member: Optional[Member] = None
    node = root
    for step in parse_path(path):
        member = _lookup(node, step, source)
        if member is None:
            return None
        node = member.node
    return member


def resolve_path(root: Node, path: PathLike, source: str) -> Optional[Node]:
    steps = parse_path(path)
    if not steps:
        return root
    member = resolve_member(root, steps, source)
    return member.node if member is not None else None


def get(text: str, path: PathLike) -> Optional[str]:
    """Return the exact source text of the node at ``path``, or None."""
    node = resolve_path(parse(text), path, text)
    if node is None:
        return None
    return text[node.start : node.end]


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsoncst get")
    ap.add_argument("path", help="Path to the JSON file")
    ap.add_argument("expr", help="Dot path or JSON Pointer")
    args = ap.parse_args(argv)

    file_path = Path(args.path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Failed to read file: {e}", file=sys.stderr)
        return 3

    try:
        found = get(text, args.expr)
    except (LexError, ParseError) as e:
        print(describe_error(str(file_path), text, e), file=sys.stderr)
        return 3

    if found is None:
        print(f"{args.expr}: not found", file=sys.stderr)
        return 1
    sys.stdout.write(found + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
