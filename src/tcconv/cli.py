#!/usr/bin/env python3
# cli.py — command line entrypoint
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tcconv import __version__
from tcconv.converter import convert_bytes
from tcconv.errors import EncodingFailure, SchemeError
from tcconv.registry import describe_formats
from tcconv.schema import load_settings
from tcconv.tc_constants import ConstantStuff as CS, MultiSchemeMode, SchemeFormat

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID = 2
EXIT_ENCODING = 3
EXIT_IO = 4


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tcconv", description="Convert terminal color schemes between formats.")
    p.add_argument("input", nargs="?", help="Source scheme file (default: stdin)")
    p.add_argument("-f", "--from", dest="source", metavar="FROM_FORMAT",
                   help="From format. Case insensitive (eg. wt)")
    p.add_argument("-t", "--to", dest="destination", metavar="TO_FORMAT",
                   help="To format. Case insensitive (eg. alacritty)")
    p.add_argument("-o", "--output", help="Target scheme file (default: stdout)")
    p.add_argument("-l", "--list", action="store_true", help="List available formats and exit")
    p.add_argument("--multi-scheme", choices=[m.value for m in MultiSchemeMode], default=None,
                   help="What to do when a single-scheme format receives several schemes "
                        f"(default: ${CS.ENV_MULTI_SCHEME} or concatenate)")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return p


def list_available_formats(out=None) -> None:
    out = out or sys.stdout
    aliases = {}
    for alias, fmt in CS.FORMAT_ALIASES.items():
        aliases.setdefault(fmt, []).append(alias)
    for fmt, can_decode, can_encode in describe_formats():
        modes = "".join(("r" if can_decode else "-", "w" if can_encode else "-"))
        out.write(f"{modes}  {fmt.label:<26} {', '.join(aliases.get(fmt, []))}\n")


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_output(path: Optional[str], text: str) -> None:
    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("").setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    logging.debug("Starting main with args: %s", argv)

    if args.list:
        list_available_formats()
        return EXIT_OK

    if not args.source or not args.destination:
        sys.stderr.write("-h for usage\n")
        return EXIT_USAGE

    try:
        settings = load_settings(multi_scheme_mode=args.multi_scheme)
    except ValueError as e:
        logging.error("%s", e)
        return EXIT_USAGE

    try:
        source = SchemeFormat.from_str(args.source)
        destination = SchemeFormat.from_str(args.destination)
    except SchemeError as e:
        logging.error("%s", e.message)
        return EXIT_INVALID

    try:
        data = _read_input(args.input)
    except OSError as e:
        logging.error("Cannot read input: %s", e)
        return EXIT_IO

    try:
        result = convert_bytes(data, source, destination, settings)
    except EncodingFailure as e:
        logging.error("%s", e.message)
        return EXIT_ENCODING
    except SchemeError as e:
        logging.error("Conversion failed: %s", e.message)
        return EXIT_INVALID

    try:
        _write_output(args.output, result)
    except OSError as e:
        logging.error("Cannot write output: %s", e)
        return EXIT_IO

    logging.info("Done.")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
