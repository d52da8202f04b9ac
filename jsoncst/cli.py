#!/usr/bin/env python3
"""jsoncst unified CLI.

Argument parsing is delegated to the individual tool modules, so each tool
is usable both as:
- `jsoncst <command> ...`
- `python -m jsoncst.tools.<tool> ...`

Commands:
- get       Print the source text of the value at a path
- replace   Replace values at paths
- insert    Insert a property or array element
- remove    Delete members at paths
- batch     Apply a JSON file of mixed operations

Example:
  jsoncst replace settings.json --set editor.tabSize 2 --in-place
"""

from __future__ import annotations

import sys
from typing import List, Optional

from jsoncst.tools import batch, insert, remove, replace, resolve


def _help() -> str:
    return (
        "jsoncst CLI\n\n"
        "Usage:\n"
        "  jsoncst <command> [args...]\n\n"
        "Commands:\n"
        "  get         Print the value at a path\n"
        "  replace     Replace values (--set PATH VALUE, repeatable)\n"
        "  insert      Insert a property or array element\n"
        "  remove      Delete members (alias: delete)\n"
        "  batch       Apply a patch file of mixed operations\n"
        "  version     Show current version\n"
    )


def _print_version() -> int:
    try:
        from importlib.metadata import PackageNotFoundError, version

        v = version("jsoncst")
    except PackageNotFoundError:
        v = "unknown"
    print(v)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in {"-h", "--help", "help"}:
        sys.stdout.write(_help())
        return 0

    cmd, rest = argv[0], argv[1:]
    if cmd in {"version", "--version", "-V"}:
        return _print_version()
    if cmd == "get":
        return resolve.main(rest)
    if cmd == "replace":
        return replace.main(rest)
    if cmd == "insert":
        return insert.main(rest)
    if cmd in {"remove", "delete"}:
        return remove.main(rest)
    if cmd == "batch":
        return batch.main(rest)

    sys.stderr.write(f"Unknown command: {cmd}\n\n")
    sys.stderr.write(_help())
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
