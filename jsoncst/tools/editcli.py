"""Shared plumbing for the editing commands (replace/insert/remove/batch).

Exit codes:
  0 OK
  1 --check: the edit would change the file
  2 patch error, or --verify found the result unparsable
  3 IO / lex / parse error in the input
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from jsoncst.tools.cst import ParseError, parse
from jsoncst.tools.patches import PatchError
from jsoncst.tools.textpos import describe_error
from jsoncst.tools.tokenizer import LexError


def add_output_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("path", help="Path to the JSON file to edit")
    ap.add_argument("--in-place", action="store_true", help="Overwrite input file")
    ap.add_argument("--out", help="Write the edited text to this file")
    ap.add_argument("--check", action="store_true", help="Exit 1 if the edit would change the file")
    ap.add_argument("--verify", action="store_true", help="Re-parse the result and fail if it is invalid")


def run_edit(args: argparse.Namespace, edit: Callable[[str], str]) -> int:
    path = Path(args.path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Failed to read file: {e}", file=sys.stderr)
        return 3

    try:
        result = edit(text)
    except (LexError, ParseError) as e:
        print(describe_error(str(path), text, e), file=sys.stderr)
        return 3
    except PatchError as e:
        print(f"{path}: {e}", file=sys.stderr)
        return 2

    if args.verify:
        try:
            parse(result)
        except (LexError, ParseError) as e:
            print(f"edited text is invalid: {describe_error(str(path), result, e)}", file=sys.stderr)
            return 2

    if args.check:
        return 0 if result == text else 1

    if args.in_place:
        path.write_text(result, encoding="utf-8")
        return 0

    if args.out:
        Path(args.out).write_text(result, encoding="utf-8")
        return 0

    sys.stdout.write(result)
    return 0
