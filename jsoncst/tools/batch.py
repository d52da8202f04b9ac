"""Apply a mixed list of replace/insert/delete operations in one call.

Every entry names its ``operation`` explicitly:

    batch(text, [
        {"operation": "replace", "path": "version", "value": '"2.0"'},
        {"operation": "insert", "path": "plugins", "value": '"lint"'},
        {"operation": "delete", "path": "legacy"},
    ])

All entries are classified before any text is touched, so a bad entry fails
the whole call. Categories always run in the order replace, insert, delete,
regardless of input order. The initial parse is reused only while the text
is unchanged; after a category rewrites the text the next one parses again.

CLI:
  jsoncst batch config.json patches.json --in-place
  (patches.json is validated against jsoncst/schema/patches.schema.v1.json)
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Union

from jsoncst.tools.cst import ParsedDocument, parse_document
from jsoncst.tools import editcli
from jsoncst.tools.insert import insert
from jsoncst.tools.patches import (
    DeletePatch,
    InsertPatch,
    PatchError,
    ReplacePatch,
    as_list,
    coerce_delete,
    coerce_insert,
    coerce_replace,
)
from jsoncst.tools.remove import remove
from jsoncst.tools.replace import replace
from jsoncst.tools import validate

OPERATIONS = ("replace", "delete", "remove", "insert")

BatchEntry = Union[ReplacePatch, InsertPatch, DeletePatch, Mapping[str, Any]]


@dataclass
class _Plan:
    replace: List[ReplacePatch] = field(default_factory=list)
    insert: List[InsertPatch] = field(default_factory=list)
    delete: List[DeletePatch] = field(default_factory=list)


def classify(entries: Iterable[BatchEntry]) -> _Plan:
    plan = _Plan()
    for entry in as_list(entries):
        if isinstance(entry, ReplacePatch):
            plan.replace.append(entry)
            continue
        if isinstance(entry, InsertPatch):
            plan.insert.append(entry)
            continue
        if isinstance(entry, DeletePatch):
            plan.delete.append(entry)
            continue
        if not isinstance(entry, Mapping):
            raise PatchError(f"batch entry must be a mapping, got {type(entry).__name__}")

        op = entry.get("operation")
        path = entry.get("path")
        if not op:
            raise PatchError(
                'operation is required: specify "replace", "delete", "remove" or "insert"',
                repr(path) if not isinstance(path, str) else path,
            )
        if op == "replace":
            plan.replace.append(coerce_replace(entry))
        elif op == "insert":
            plan.insert.append(coerce_insert(entry))
        elif op in ("delete", "remove"):
            plan.delete.append(coerce_delete(entry))
        else:
            raise PatchError(
                f"invalid operation {op!r}: must be one of {', '.join(OPERATIONS)}",
                repr(path) if not isinstance(path, str) else path,
            )
    return plan


def batch(text: str, entries: Iterable[BatchEntry]) -> str:
    plan = classify(entries)
    if not (plan.replace or plan.insert or plan.delete):
        return text

    doc = parse_document(text)
    result = text

    if plan.replace:
        result = replace(result, plan.replace, doc)
    if plan.insert:
        result = insert(result, plan.insert, _current(doc, result))
    if plan.delete:
        result = remove(result, plan.delete, _current(doc, result))
    return result


def _current(doc: ParsedDocument, text: str) -> Optional[ParsedDocument]:
    """The initial parse if it still describes ``text``; None forces a re-parse."""
    if doc.text == text:
        return doc
    return None


def load_entries(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsoncst batch")
    editcli.add_output_args(ap)
    ap.add_argument("patches", help="JSON file with the list of operations ('-' for stdin)")
    ap.add_argument("--no-validate", action="store_true", help="Skip schema validation of the patch file")
    ap.add_argument("--json-errors", action="store_true", help="Emit validation errors as JSON on stderr")
    args = ap.parse_args(argv)

    try:
        entries = load_entries(args.patches)
    except (OSError, ValueError) as e:
        print(f"Failed to read/parse patch file: {e}", file=sys.stderr)
        return 3

    if not args.no_validate:
        errors = validate.validate(entries, validate.load_schema())
        if errors:
            if args.json_errors:
                print(json.dumps(errors, indent=2, ensure_ascii=False), file=sys.stderr)
            else:
                for e in errors:
                    print(f"{args.patches}{e['pointer']}: {e['message']}", file=sys.stderr)
            return 2

    return editcli.run_edit(args, lambda text: batch(text, entries))


if __name__ == "__main__":
    raise SystemExit(main())
