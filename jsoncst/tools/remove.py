"""Delete object properties and array elements from JSON text.

    remove('{"a": 1, "b": 2}', [{"path": "a"}])
    -> '{"b": 2}'

Exactly one separator comma goes with every deleted member so the container
stays well formed:

- a member followed by a surviving member takes its trailing comma (and the
  whitespace after it, when nothing but whitespace separates it from the
  next member)
- the last member takes the comma in front of it
- deleting every member leaves an empty container; whitespace that touches
  the brackets goes too, comments stay

Consecutive deleted members of one container are handled as a single run,
so deleting ``b`` and ``c`` from ``[a, b, c]`` never removes the same comma
twice. Paths that do not resolve are skipped; overlapping or nested targets
raise ``PatchError`` before anything is changed.

CLI:
  jsoncst remove config.json legacy /plugins/0 --in-place
"""

from __future__ import annotations

import argparse
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from jsoncst.tools.cst import Container, ObjectNode, ParsedDocument, parse_document
from jsoncst.tools import editcli
from jsoncst.tools.patches import (
    DeletePatch,
    PatchError,
    PatchInput,
    apply_splices,
    as_list,
    check_disjoint,
    coerce_delete,
)
from jsoncst.tools.pointer import format_path, parse_path
from jsoncst.tools.resolve import Member, resolve_member
from jsoncst.tools.tokenizer import Token, TokenKind

Span = Tuple[int, int]


def _member_spans(container: Container) -> List[Span]:
    if isinstance(container, ObjectNode):
        return [(p.start, p.end) for p in container.properties]
    return [(e.start, e.end) for e in container.elements]


def _runs(indices: Set[int]) -> List[Tuple[int, int]]:
    runs: List[Tuple[int, int]] = []
    for i in sorted(indices):
        if runs and runs[-1][1] == i - 1:
            runs[-1] = (runs[-1][0], i)
        else:
            runs.append((i, i))
    return runs


class _TokenNav:
    """Token lookups by offset; member boundaries always fall on token edges."""

    def __init__(self, text: str, tokens: Sequence[Token]) -> None:
        self.text = text
        self.tokens = tokens
        self.by_start: Dict[int, int] = {t.start: i for i, t in enumerate(tokens)}
        self.by_end: Dict[int, int] = {t.end: i for i, t in enumerate(tokens)}

    def kind(self, i: int) -> Optional[TokenKind]:
        if 0 <= i < len(self.tokens):
            return self.tokens[i].kind
        return None

    def next_significant(self, i: int) -> int:
        i += 1
        while i < len(self.tokens) and self.tokens[i].is_trivia:
            i += 1
        return i

    def prev_significant(self, i: int) -> int:
        i -= 1
        while i >= 0 and self.tokens[i].is_trivia:
            i -= 1
        return i

    def comma_after(self, end: int) -> Optional[int]:
        j = self.next_significant(self.by_end[end])
        return j if self.kind(j) == TokenKind.COMMA else None

    def is_line_comment(self, i: int) -> bool:
        return self.kind(i) == TokenKind.COMMENT and self.text.startswith("//", self.tokens[i].start)

    def breaks_line(self, i: int) -> bool:
        return self.kind(i) == TokenKind.WHITESPACE and "\n" in self.tokens[i].text(self.text)


def _container_splices(nav: _TokenNav, container: Container, deleted: Set[int]) -> List[Span]:
    tokens = nav.tokens
    spans = _member_spans(container)
    n = len(spans)

    if len(deleted) == n:
        start, end = spans[0][0], spans[-1][1]
        trailing = nav.comma_after(end)
        if trailing is not None:
            end = tokens[trailing].end
        first, last = nav.by_start[start], nav.by_end[end]
        if nav.kind(first - 1) == TokenKind.WHITESPACE and first - 2 == nav.by_start[container.start]:
            start = tokens[first - 1].start
        if nav.kind(last + 1) == TokenKind.WHITESPACE and last + 2 == nav.by_end[container.end]:
            end = tokens[last + 1].end
        return [(start, end)]

    out: List[Span] = []
    for i, j in _runs(deleted):
        if j < n - 1:
            comma = nav.comma_after(spans[j][1])
            if comma is None:  # pragma: no cover - the parser requires separators
                raise PatchError("missing separator after deleted member")
            end = tokens[comma].end
            next_first = nav.by_start[spans[j + 1][0]]
            if nav.kind(comma + 1) == TokenKind.WHITESPACE and comma + 2 == next_first:
                end = tokens[comma + 1].end
            out.append((spans[i][0], end))
            continue

        end = spans[j][1]
        trailing = nav.comma_after(end)
        if trailing is not None:
            end = tokens[trailing].end
        first = nav.by_start[spans[i][0]]
        comma = nav.prev_significant(first)
        if nav.kind(comma) != TokenKind.COMMA:  # pragma: no cover
            raise PatchError("missing separator before deleted member")
        if comma + 1 == first or (nav.kind(comma + 1) == TokenKind.WHITESPACE and comma + 2 == first):
            out.append((tokens[comma].start, end))
        else:
            # comments between the comma and the run are kept, the
            # indentation in front of the run is not
            start = spans[i][0]
            ws = first - 1
            if nav.kind(ws) == TokenKind.WHITESPACE:
                start = tokens[ws].start
                if nav.is_line_comment(ws - 1) and not nav.breaks_line(nav.by_end[end] + 1):
                    # a line comment still needs its newline
                    start += tokens[ws].text(nav.text).rfind("\n") + 1
            out.append((start, end))
            out.append((tokens[comma].start, tokens[comma].end))
    return out


def remove(text: str, patches: Iterable[PatchInput], document: Optional[ParsedDocument] = None) -> str:
    items = [coerce_delete(p) for p in as_list(patches)]
    if not items:
        return text
    doc = document if document is not None else parse_document(text)

    matches: List[Tuple[Member, DeletePatch]] = []
    for p in items:
        if not parse_path(p.path):
            raise PatchError("cannot delete the document root", format_path(p.path))
        member = resolve_member(doc.root, p.path, doc.text)
        if member is not None:
            matches.append((member, p))
    matches.sort(key=lambda m: m[0].node.start, reverse=True)
    check_disjoint([(m.node, p.path) for m, p in matches])

    groups: Dict[int, Tuple[Container, Set[int]]] = {}
    for m, _ in matches:
        groups.setdefault(m.container.start, (m.container, set()))[1].add(m.index)

    nav = _TokenNav(doc.text, doc.tokens)
    ranges: List[Span] = []
    for container, deleted in groups.values():
        ranges.extend(_container_splices(nav, container, deleted))
    ranges.sort(reverse=True)
    return apply_splices(text, ((start, end, "") for start, end in ranges))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsoncst remove")
    editcli.add_output_args(ap)
    ap.add_argument("targets", nargs="+", help="Paths of the members to delete")
    args = ap.parse_args(argv)

    patches = [DeletePatch(t) for t in args.targets]
    return editcli.run_edit(args, lambda text: remove(text, patches))


if __name__ == "__main__":
    raise SystemExit(main())
