"""Command-line interface for unibom."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import unibom
from unibom._utils import peekable
from unibom.detector import detect


def _describe(charset: unibom.BOMCharset | None, minimal: bool) -> str:
    if charset is not None:
        return charset.value
    return "none" if minimal else "no BOM"


def main(argv: list[str] | None = None) -> None:
    """Run the ``unibom`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Report the byte-order mark at the start of files."
    )
    parser.add_argument("files", nargs="*", help="Files to inspect")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the charset name"
    )
    parser.add_argument(
        "--version", action="version", version=f"unibom {unibom.__version__}"
    )

    args = parser.parse_args(argv)

    if not args.files:
        charset = detect(peekable(sys.stdin.buffer))
        label = _describe(charset, args.minimal)
        print(label if args.minimal else f"stdin: {label}")
        return

    failed = False
    for filepath in args.files:
        try:
            with Path(filepath).open("rb") as f:
                charset = detect(f)
        except OSError as e:
            print(f"unibom: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        label = _describe(charset, args.minimal)
        print(label if args.minimal else f"{filepath}: {label}")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
