"""Schema validation for batch patch documents.

A patch document is the JSON list handed to ``jsoncst batch``. It is checked
against ``jsoncst/schema/patches.schema.v1.json`` before any text is edited,
and every problem is reported with the JSON Pointer of the offending entry,
so a malformed file can be fixed in one pass instead of one error at a time.

``batch()`` itself performs the checks it needs at call time; this module is
the friendlier front door for files written by hand.
"""

from __future__ import annotations

import importlib.resources as importlib_resources
import json
from typing import Any, Dict, List

import jsonschema

from jsoncst.tools.pointer import join_pointer

SCHEMA_FILE = "patches.schema.v1.json"


def load_schema_text() -> str:
    with importlib_resources.files("jsoncst.schema").joinpath(SCHEMA_FILE).open("r", encoding="utf-8") as f:
        return f.read()


def load_schema() -> Dict[str, Any]:
    return json.loads(load_schema_text())


def validate(entries: Any, schema: Dict[str, Any]) -> List[Dict[str, Any]]:
    validator = jsonschema.Draft202012Validator(schema)
    errors: List[Dict[str, Any]] = []
    for err in sorted(validator.iter_errors(entries), key=lambda e: [(isinstance(p, str), p) for p in e.absolute_path]):
        errors.append(
            {
                "pointer": join_pointer(list(err.absolute_path)),
                "message": err.message,
                "validator": err.validator,
            }
        )
    return errors
