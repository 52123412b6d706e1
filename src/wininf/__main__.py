import argparse
import json
import logging
import sys
from typing import Any, Sequence

from . import load_file
from .encoding import Encoding
from .entry import KeyValue
from .errors import InfError
from .section import Section

logger = logging.getLogger("wininf")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wininf",
        description="Parse a Windows INF file and print its sections.",
    )
    parser.add_argument("path", help="INF file to read")
    parser.add_argument(
        "--encoding",
        metavar="CODEC",
        help=(
            "encoding to assume when the file has no byte-order mark "
            "(utf-8, utf-16-le or utf-16-be, or an alias of one)"
        ),
    )
    parser.add_argument(
        "--section",
        action="append",
        dest="sections",
        metavar="NAME",
        help="only print this section (repeatable)",
    )
    parser.add_argument(
        "--names",
        action="store_true",
        help="print section names only, one per line",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    encoding: Encoding | None = None

    try:
        if args.encoding is not None:
            encoding = Encoding.from_hint(args.encoding)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1

    try:
        document = load_file(args.path, encoding=encoding)
    except (InfError, OSError) as exc:
        logger.error("%s: %s", args.path, exc)
        return 1

    sections = list(document)

    if args.sections:
        missing = [name for name in args.sections if name not in document]

        if missing:
            logger.error(
                "%s: no such section: %s", args.path, ", ".join(missing)
            )
            return 1

        sections = [document[name] for name in args.sections]

    if args.names:
        for section in sections:
            print(section.name)
    else:
        json.dump([as_json(s) for s in sections], sys.stdout, indent=2)
        print()

    return 0


def as_json(section: Section) -> dict[str, Any]:
    entries: list[dict[str, Any]] = []

    for entry in section:
        if isinstance(entry, KeyValue):
            entries.append({"key": entry.key, "values": list(entry.values)})
        else:
            entries.append({"values": list(entry.values)})

    return {"name": section.name, "entries": entries}


if __name__ == "__main__":
    sys.exit(main())
