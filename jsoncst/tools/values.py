"""Helpers that turn Python values into JSON literal text for patches.

Patch values are spliced in verbatim, so a Python string has to arrive
already quoted and escaped:

    replace(text, [{"path": "name", "value": string("Bob")}])
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, List

_SEPARATORS = (",", ":")


def format_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=_SEPARATORS, allow_nan=False)


def string(value: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"string() expects str, got {type(value).__name__}")
    return json.dumps(value, ensure_ascii=False)


def number(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"number() expects int or float, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{value!r} has no JSON representation")
    return json.dumps(value)


def boolean(value: bool) -> str:
    if not isinstance(value, bool):
        raise ValueError(f"boolean() expects bool, got {type(value).__name__}")
    return "true" if value else "false"


def null_value() -> str:
    return "null"


def obj(value: Dict[str, Any]) -> str:
    if not isinstance(value, dict):
        raise ValueError(f"obj() expects dict, got {type(value).__name__}")
    return format_value(value)


def array(value: List[Any]) -> str:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"array() expects list, got {type(value).__name__}")
    return format_value(list(value))
