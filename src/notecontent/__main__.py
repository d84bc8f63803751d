"""CLI entry point for note parsing: python -m notecontent"""

import argparse
import json
import logging
import sys
from pathlib import Path

from notecontent.errors import NoteContentError
from notecontent.markdown.parser import get_parser

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="notecontent",
        description="Print the title, body and lead of Markdown notes as JSON lines",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Note files to parse ('-' reads standard input)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    note_parser = get_parser()
    failures = 0

    for path in args.paths:
        try:
            content = note_parser.parse(_read_source(path))
        except (OSError, UnicodeDecodeError, NoteContentError) as e:
            logger.error("Failed to parse %s: %s", path, e)
            failures += 1
            continue

        print(json.dumps({"path": path, **content.model_dump()}, ensure_ascii=False))

    if failures:
        logger.error("%d of %d notes failed", failures, len(args.paths))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
