"""Format-preserving edits for JSON-with-comments text.

    import jsoncst

    text = '{\n  // port the service listens on\n  "port": 8080\n}'
    jsoncst.replace(text, [{"path": "port", "value": "8081"}])

Only the bytes of the edited values change; whitespace, comments and key
order elsewhere are left exactly as written.
"""

from jsoncst.tools.batch import batch
from jsoncst.tools.cst import ParseError, ParsedDocument, parse, parse_document
from jsoncst.tools.insert import insert
from jsoncst.tools.patches import DeletePatch, InsertPatch, PatchError, ReplacePatch
from jsoncst.tools.remove import remove
from jsoncst.tools.replace import replace
from jsoncst.tools.resolve import get, resolve_path
from jsoncst.tools.tokenizer import LexError, tokenize
from jsoncst.tools.values import array, boolean, format_value, null_value, number, obj, string

__all__ = [
    "replace",
    "insert",
    "remove",
    "batch",
    "get",
    "resolve_path",
    "tokenize",
    "parse",
    "parse_document",
    "ParsedDocument",
    "ReplacePatch",
    "InsertPatch",
    "DeletePatch",
    "LexError",
    "ParseError",
    "PatchError",
    "format_value",
    "string",
    "number",
    "boolean",
    "null_value",
    "obj",
    "array",
]
