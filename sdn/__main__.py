from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sdn.config import load_options_from_json, merge_options
from sdn.errors import SdnConfigError, SdnError
from sdn.printer import dumps, dumps_all
from sdn.reader import parse

log = logging.getLogger("sdn")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sdn", description="Parse SDN text and print the values it contains.")
    parser.add_argument("files", nargs="*", type=Path, help="files to read (default: stdin)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--canonical", action="store_true", help="print one canonical value per line")
    mode.add_argument("--check", action="store_true", help="only report errors")
    parser.add_argument("--options", metavar="JSON", help='printer options, e.g. \'{"sort_keys": false}\'')
    parser.add_argument("--no-sort-keys", action="store_true", help="keep keyword arguments in source order")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options_from_json(args.options) if args.options else merge_options()
    except SdnConfigError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2
    if args.no_sort_keys:
        options["sort_keys"] = False

    for path in args.files or [None]:
        name = "<stdin>" if path is None else str(path)
        try:
            text = sys.stdin.read() if path is None else path.read_text(encoding=options["encoding"])
            data = parse(text)
        except OSError as e:
            print(f"{name}: {e.strerror or e}", file=sys.stderr)
            return 1
        except UnicodeError as e:
            print(f"{name}: cannot decode as {options['encoding']}: {e}", file=sys.stderr)
            return 1
        except SdnError as e:
            print(f"Parser error:\n{name}: {e}", file=sys.stderr)
            return 1
        log.debug("%s: %d value(s)", name, len(data))

        if args.check:
            continue
        if args.canonical:
            if data:
                print(dumps_all(data, sort_keys=options["sort_keys"]))
            continue
        print("Data:")
        for x in data:
            print(f"* {dumps(x, sort_keys=options['sort_keys'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
