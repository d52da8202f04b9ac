"""Tokenizer tests: kinds, coverage, and the error cases."""

import pytest

from jsoncst.tools.tokenizer import LexError, TokenKind, tokenize


def joined(tokens, source):
    return "".join(t.text(source) for t in tokens)


def kinds(source):
    return [t.kind.value for t in tokenize(source)]


class TestTokenKinds:

    def test_minimal_object(self):
        assert kinds("{}") == ["braceL", "braceR"]

    def test_whitespace_run_is_one_token(self):
        assert kinds("{ \n\t\r }") == ["braceL", "whitespace", "braceR"]

    def test_object_and_array(self):
        assert kinds('{"a":[1,2]}') == [
            "braceL", "string", "colon", "bracketL", "number",
            "comma", "number", "bracketR", "braceR",
        ]

    def test_keywords(self):
        assert kinds("true false null") == [
            "boolean", "whitespace", "boolean", "whitespace", "null",
        ]

    @pytest.mark.parametrize("src", ["0", "-1", "3.14", "1e10", "-2.5E-3", "1E+2"])
    def test_number_formats(self, src):
        tokens = tokenize(src)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.NUMBER
        assert tokens[0].text(src) == src

    def test_numbers_are_permissive(self):
        # no leading-zero or digit-presence validation
        assert kinds("01") == ["number"]
        assert kinds("-") == ["number"]
        assert kinds("1.") == ["number"]

    def test_string_with_escapes(self):
        src = '"a\\n\\"b"'
        tokens = tokenize(src)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.STRING
        assert tokens[0].end == len(src)

    def test_backslash_consumes_next_char_unconditionally(self):
        src = '"\\q\\\\"'
        tokens = tokenize(src)
        assert [t.kind for t in tokens] == [TokenKind.STRING]

    def test_line_comment(self):
        src = '{//c\n"a":1}'
        assert "comment" in kinds(src)
        assert tokenize(src)[1].text(src) == "//c"

    def test_line_comment_at_end_of_input(self):
        src = "1 // trailing"
        assert kinds(src) == ["number", "whitespace", "comment"]

    def test_block_comment(self):
        src = '{/* comment */"a":1}'
        tokens = tokenize(src)
        assert tokens[1].kind == TokenKind.COMMENT
        assert tokens[1].text(src) == "/* comment */"

    def test_trivia_flag(self):
        tokens = tokenize("[ /*x*/ 1]")
        assert [t.is_trivia for t in tokens] == [False, True, True, True, False, False]


class TestCoverage:

    SOURCES = [
        "",
        "{}",
        '{//c\n"a":1}',
        '{\n    "a": 1,\n    // comment\n    "b": [ true, false ]\n  }',
        '[1, /* two */ 2, "th\\"ree"]\n',
        '  {"nested": {"deep": [null, -1.5e3]}}  ',
    ]

    @pytest.mark.parametrize("src", SOURCES)
    def test_tokens_reproduce_source(self, src):
        tokens = tokenize(src)
        assert joined(tokens, src) == src

    @pytest.mark.parametrize("src", SOURCES)
    def test_tokens_are_contiguous(self, src):
        tokens = tokenize(src)
        if not src:
            assert tokens == []
            return
        assert tokens[0].start == 0
        assert tokens[-1].end == len(src)
        for prev, cur in zip(tokens, tokens[1:]):
            assert prev.end == cur.start


class TestLexErrors:

    def test_unexpected_character(self):
        with pytest.raises(LexError) as exc:
            tokenize("@")
        assert "unexpected character" in exc.value.message
        assert exc.value.index == 0

    def test_unexpected_character_reports_offset(self):
        with pytest.raises(LexError) as exc:
            tokenize('{"a": #}')
        assert exc.value.index == 6
        assert "'#'" in str(exc.value)

    def test_unknown_identifier(self):
        with pytest.raises(LexError, match="unexpected identifier 'nul'"):
            tokenize("[nul]")

    def test_keyword_must_match_whole_word(self):
        with pytest.raises(LexError, match="trueish"):
            tokenize("trueish")

    def test_unterminated_block_comment(self):
        with pytest.raises(LexError, match="unterminated block comment"):
            tokenize("{/* never closed }")

    def test_unterminated_string(self):
        with pytest.raises(LexError, match="unterminated string"):
            tokenize('{"a')

    def test_string_ending_in_backslash(self):
        with pytest.raises(LexError, match="unterminated string"):
            tokenize('"abc\\')
