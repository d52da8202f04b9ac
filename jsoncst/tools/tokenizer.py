"""Lossless tokenizer for JSON-with-comments text.

The tokenizer never drops anything: whitespace runs and comments become
tokens of their own, so the token list is a gap-free covering of the source.
Concatenating ``source[t.start:t.end]`` for every token gives back the input
byte for byte, which is what lets the editors splice text without touching
formatting they did not mean to change.

Numbers are read permissively (``-``, ``01``, ``1.`` all lex as numbers);
validating literals is not the tokenizer's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(str, Enum):
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    BRACE_L = "braceL"
    BRACE_R = "braceR"
    BRACKET_L = "bracketL"
    BRACKET_R = "bracketR"
    COLON = "colon"
    COMMA = "comma"


TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.COMMENT})

WHITESPACE_CHARS = " \n\r\t"

PUNCTUATION = {
    "{": TokenKind.BRACE_L,
    "}": TokenKind.BRACE_R,
    "[": TokenKind.BRACKET_L,
    "]": TokenKind.BRACKET_R,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

KEYWORDS = {
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "null": TokenKind.NULL,
}


@dataclass
class LexError(Exception):
    """Tokenization failure with a stable character offset."""

    message: str
    index: int

    def __str__(self) -> str:
        return f"{self.message} at index {self.index}"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    start: int
    end: int

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA

    def text(self, source: str) -> str:
        return source[self.start : self.end]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class _Lexer:
    def __init__(self, text: str) -> None:
        self.text = text
        self.n = len(text)
        self.i = 0
        self.tokens: List[Token] = []

    def _peek(self, offset: int = 0) -> str:
        j = self.i + offset
        return self.text[j] if j < self.n else ""

    def _emit(self, kind: TokenKind, start: int) -> None:
        self.tokens.append(Token(kind, start, self.i))

    def run(self) -> List[Token]:
        while self.i < self.n:
            ch = self.text[self.i]
            if ch in WHITESPACE_CHARS:
                self._read_whitespace()
            elif ch == '"':
                self._read_string()
            elif ch == "-" or _is_digit(ch):
                self._read_number()
            elif _is_alpha(ch):
                self._read_keyword()
            elif ch == "/" and self._peek(1) == "/":
                self._read_line_comment()
            elif ch == "/" and self._peek(1) == "*":
                self._read_block_comment()
            else:
                self._read_punctuation()
        return self.tokens

    def _read_whitespace(self) -> None:
        start = self.i
        while self.i < self.n and self.text[self.i] in WHITESPACE_CHARS:
            self.i += 1
        self._emit(TokenKind.WHITESPACE, start)

    def _read_string(self) -> None:
        start = self.i
        self.i += 1  # opening quote
        while True:
            if self.i >= self.n:
                raise LexError("unterminated string", start)
            ch = self.text[self.i]
            if ch == "\\":
                # The escaped character is taken verbatim, legal or not.
                if self.i + 1 >= self.n:
                    raise LexError("unterminated string", start)
                self.i += 2
                continue
            self.i += 1
            if ch == '"':
                break
        self._emit(TokenKind.STRING, start)

    def _read_digits(self) -> None:
        while self.i < self.n and _is_digit(self.text[self.i]):
            self.i += 1

    def _read_number(self) -> None:
        start = self.i
        if self._peek() == "-":
            self.i += 1
        self._read_digits()
        if self._peek() == ".":
            self.i += 1
            self._read_digits()
        if self._peek() in ("e", "E"):
            self.i += 1
            if self._peek() in ("+", "-"):
                self.i += 1
            self._read_digits()
        self._emit(TokenKind.NUMBER, start)

    def _read_keyword(self) -> None:
        start = self.i
        while self.i < self.n and _is_alpha(self.text[self.i]):
            self.i += 1
        word = self.text[start : self.i]
        kind = KEYWORDS.get(word)
        if kind is None:
            raise LexError(f"unexpected identifier {word!r}", start)
        self._emit(kind, start)

    def _read_line_comment(self) -> None:
        start = self.i
        end = self.text.find("\n", self.i + 2)
        self.i = self.n if end == -1 else end
        self._emit(TokenKind.COMMENT, start)

    def _read_block_comment(self) -> None:
        start = self.i
        end = self.text.find("*/", self.i + 2)
        if end == -1:
            raise LexError("unterminated block comment", start)
        self.i = end + 2
        self._emit(TokenKind.COMMENT, start)

    def _read_punctuation(self) -> None:
        start = self.i
        ch = self.text[self.i]
        kind = PUNCTUATION.get(ch)
        if kind is None:
            raise LexError(f"unexpected character {ch!r}", start)
        self.i += 1
        self._emit(kind, start)


def tokenize(source: str) -> List[Token]:
    """Split ``source`` into a contiguous list of tokens covering all of it."""
    return _Lexer(source).run()
