"""remove(): member deletion with separator clean-up."""

import pytest

from jsoncst import DeletePatch, PatchError, parse, remove
from jsoncst.tools.cst import ArrayNode


def rm(src, *paths):
    return remove(src, [{"path": p} for p in paths])


class TestRemoveSingle:

    def test_first_property(self):
        assert rm('{"a": 1, "b": 2}', "a") == '{"b": 2}'

    def test_last_property(self):
        assert rm('{"a": 1, "b": 2}', "b") == '{"a": 1}'

    def test_middle_element(self):
        assert rm("[1, 2, 3]", "[1]") == "[1, 3]"

    def test_last_element(self):
        assert rm("[1, 2, 3]", "/2") == "[1, 2]"

    def test_only_property(self):
        assert rm('{ "a": 1 }', "a") == "{}"

    def test_only_element(self):
        assert rm("[1]", "[0]") == "[]"

    def test_nested(self):
        src = '{"a": {"b": 1, "c": [true, false]}}'
        assert rm(src, "a.c[0]") == '{"a": {"b": 1, "c": [false]}}'
        assert rm(src, "a.b") == '{"a": {"c": [true, false]}}'

    def test_tolerated_trailing_comma(self):
        assert rm("[1, 2,]", "[1]") == "[1]"

    def test_typed_patch(self):
        assert remove('{"a": 1, "b": 2}', [DeletePatch("/a")]) == '{"b": 2}'


class TestRemoveMultiline:

    SOURCE = '{\n  "a": 1,\n  "b": 2,\n  "c": 3\n}'

    def test_middle_line(self):
        assert rm(self.SOURCE, "b") == '{\n  "a": 1,\n  "c": 3\n}'

    def test_first_line(self):
        assert rm(self.SOURCE, "a") == '{\n  "b": 2,\n  "c": 3\n}'

    def test_last_line(self):
        assert rm(self.SOURCE, "c") == '{\n  "a": 1,\n  "b": 2\n}'

    def test_comment_before_last_member_is_kept(self):
        src = '{\n  "a": 1, // keep\n  "b": 2\n}'
        out = rm(src, "b")
        assert out == '{\n  "a": 1 // keep\n}'
        parse(out)

    def test_block_comment_before_last_element_is_kept(self):
        src = "[\n  1, /* keep */\n  2\n]"
        assert rm(src, "[1]") == "[\n  1 /* keep */\n]"

    def test_line_comment_keeps_its_newline(self):
        out = rm("[1, // keep\n  2]", "[1]")
        assert out == "[1 // keep\n]"
        assert isinstance(parse(out), ArrayNode)

    def test_comment_in_emptied_container_is_kept(self):
        src = '{\n  // only\n  "a": 1\n}'
        assert rm(src, "a") == '{\n  // only\n  }'


class TestRemoveRuns:

    def test_tail_run(self):
        assert rm("[1, 2, 3]", "[1]", "[2]") == "[1]"

    def test_head_run(self):
        assert rm("[1, 2, 3]", "[0]", "[1]") == "[3]"

    def test_ends(self):
        assert rm("[1, 2, 3]", "[0]", "[2]") == "[2]"

    def test_everything(self):
        assert rm("[1, 2, 3]", "[2]", "[0]", "[1]") == "[]"

    def test_object_everything(self):
        assert rm('{\n  "a": 1,\n  "b": 2\n}', "a", "b") == "{}"

    def test_independent_containers(self):
        assert rm('{"a": [1, 2], "b": 3}', "a[0]", "b") == '{"a": [2]}'

    @pytest.mark.parametrize("paths", [
        ("a",), ("b",), ("c",), ("a", "b"), ("b", "c"), ("a", "c"), ("a", "b", "c"),
    ])
    def test_result_always_parses(self, paths):
        src = '{\n  "a": [1, {"x": 2}], // one\n  /* two */ "b": null,\n  "c": "three"\n}'
        parse(rm(src, *paths))


class TestRemoveNoOpsAndErrors:

    def test_empty_patch_list_is_identity(self):
        src = '{"a": 1} // c'
        assert remove(src, []) == src

    def test_unresolved_path_is_skipped(self):
        src = '{"a": 1}'
        assert rm(src, "b", "a.b", "[0]") == src

    def test_parent_and_child_conflict(self):
        with pytest.raises(PatchError, match="conflict"):
            rm('{"a": {"b": 1}}', "a", "a.b")

    def test_same_path_twice(self):
        with pytest.raises(PatchError):
            rm('{"a": 1, "b": 2}', "a", "/a")

    def test_root_cannot_be_deleted(self):
        with pytest.raises(PatchError, match="root"):
            rm('{"a": 1}', "")
