"""Concrete syntax tree for JSON-with-comments.

The tree is built by recursive descent over the token list from
``jsoncst.tools.tokenizer``. Trivia (whitespace and comments) is skipped while
parsing and is not represented by nodes, but every node keeps the exact
``[start, end)`` offsets of its text in the source it was parsed from, so the
trivia is still there when the source is sliced around a node.

Invariants:
- child spans lie inside their parent's span
- siblings do not overlap and are stored in document order
- offsets refer to the text given to the parse that produced the tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Tuple, Union

from jsoncst.tools.tokenizer import Token, TokenKind, tokenize


@dataclass
class ParseError(Exception):
    """Structural error with the offset of the offending token."""

    message: str
    index: int

    def __str__(self) -> str:
        return f"{self.message} at index {self.index}"


# -------------------------
# Node model
# -------------------------

@dataclass(frozen=True)
class StringNode:
    kind: ClassVar[str] = "String"
    start: int
    end: int


@dataclass(frozen=True)
class NumberNode:
    kind: ClassVar[str] = "Number"
    start: int
    end: int


@dataclass(frozen=True)
class BooleanNode:
    kind: ClassVar[str] = "Boolean"
    start: int
    end: int


@dataclass(frozen=True)
class NullNode:
    kind: ClassVar[str] = "Null"
    start: int
    end: int


@dataclass(frozen=True)
class Property:
    key: StringNode
    value: "Node"

    @property
    def start(self) -> int:
        return self.key.start

    @property
    def end(self) -> int:
        return self.value.end


@dataclass(frozen=True)
class ObjectNode:
    kind: ClassVar[str] = "Object"
    start: int
    end: int
    properties: Tuple[Property, ...] = ()


@dataclass(frozen=True)
class ArrayNode:
    kind: ClassVar[str] = "Array"
    start: int
    end: int
    elements: Tuple["Node", ...] = ()


Container = Union[ObjectNode, ArrayNode]
Node = Union[ObjectNode, ArrayNode, StringNode, NumberNode, BooleanNode, NullNode]

_LEAVES = {
    TokenKind.STRING: StringNode,
    TokenKind.NUMBER: NumberNode,
    TokenKind.BOOLEAN: BooleanNode,
    TokenKind.NULL: NullNode,
}

_SYMBOLS = {
    TokenKind.BRACE_L: "{",
    TokenKind.BRACE_R: "}",
    TokenKind.BRACKET_L: "[",
    TokenKind.BRACKET_R: "]",
    TokenKind.COLON: ":",
    TokenKind.COMMA: ",",
}


def _describe(tok: Token) -> str:
    return tok.kind.value


class _Builder:
    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.i = 0
        self.eof = tokens[-1].end if tokens else 0

    def _skip_trivia(self) -> None:
        while self.i < len(self.tokens) and self.tokens[self.i].is_trivia:
            self.i += 1

    def _peek(self) -> Optional[Token]:
        self._skip_trivia()
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def _expect(self, kind: TokenKind) -> Token:
        tok = self._peek()
        want = repr(_SYMBOLS[kind]) if kind in _SYMBOLS else kind.value
        if tok is None:
            raise ParseError(f"expected {want}", self.eof)
        if tok.kind != kind:
            raise ParseError(f"expected {want}, got {_describe(tok)}", tok.start)
        self.i += 1
        return tok

    def build(self) -> Node:
        node = self._parse_value()
        tok = self._peek()
        if tok is not None:
            raise ParseError(f"unexpected token after document: {_describe(tok)}", tok.start)
        return node

    def _parse_value(self) -> Node:
        tok = self._peek()
        if tok is None:
            raise ParseError("unexpected end of input", self.eof)
        if tok.kind == TokenKind.BRACE_L:
            return self._parse_object()
        if tok.kind == TokenKind.BRACKET_L:
            return self._parse_array()
        leaf = _LEAVES.get(tok.kind)
        if leaf is None:
            raise ParseError(f"unexpected token {_describe(tok)!r}", tok.start)
        self.i += 1
        return leaf(tok.start, tok.end)

    def _at_closer(self, closer: TokenKind) -> bool:
        tok = self._peek()
        if tok is None:
            raise ParseError(f"expected {_SYMBOLS[closer]!r}", self.eof)
        return tok.kind == closer

    def _separator(self, closer: TokenKind) -> bool:
        """Consume an optional comma after a member; return True at the closer."""
        if self._at_closer(closer):
            return True
        tok = self._peek()
        if tok is not None and tok.kind == TokenKind.COMMA:
            self.i += 1
            # a trailing comma right before the closer is tolerated
            return self._at_closer(closer)
        raise ParseError(f"expected ',' or {_SYMBOLS[closer]!r}, got {_describe(tok)}", tok.start)

    def _parse_object(self) -> ObjectNode:
        open_tok = self._expect(TokenKind.BRACE_L)
        props: List[Property] = []
        if not self._at_closer(TokenKind.BRACE_R):
            while True:
                key_tok = self._expect(TokenKind.STRING)
                self._expect(TokenKind.COLON)
                value = self._parse_value()
                props.append(Property(StringNode(key_tok.start, key_tok.end), value))
                if self._separator(TokenKind.BRACE_R):
                    break
        close_tok = self._expect(TokenKind.BRACE_R)
        return ObjectNode(open_tok.start, close_tok.end, tuple(props))

    def _parse_array(self) -> ArrayNode:
        open_tok = self._expect(TokenKind.BRACKET_L)
        elements: List[Node] = []
        if not self._at_closer(TokenKind.BRACKET_R):
            while True:
                elements.append(self._parse_value())
                if self._separator(TokenKind.BRACKET_R):
                    break
        close_tok = self._expect(TokenKind.BRACKET_R)
        return ArrayNode(open_tok.start, close_tok.end, tuple(elements))


def build(tokens: List[Token]) -> Node:
    """Build the tree for a token list produced by ``tokenize``."""
    return _Builder(tokens).build()


def parse(text: str) -> Node:
    return build(tokenize(text))


@dataclass(frozen=True)
class ParsedDocument:
    """Source text together with its tokens and tree.

    Only valid for exactly ``text``; once the text changes, parse again.
    """

    text: str
    tokens: Tuple[Token, ...]
    root: Node


def parse_document(text: str) -> ParsedDocument:
    tokens = tokenize(text)
    return ParsedDocument(text, tuple(tokens), build(tokens))


def children(node: Node) -> List[Node]:
    if isinstance(node, ObjectNode):
        out: List[Node] = []
        for prop in node.properties:
            out.append(prop.key)
            out.append(prop.value)
        return out
    if isinstance(node, ArrayNode):
        return list(node.elements)
    return []


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all descendants (keys included) in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(children(node)))
