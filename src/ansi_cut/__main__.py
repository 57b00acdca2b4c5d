#!/usr/bin/env python3
"""
Command line demo for ansi_cut.

This allows the package to be run with `python -m ansi_cut`.
"""

import argparse
import logging
import sys

from colorama import Back, Fore, Style, just_fix_windows_console

from .chunker import chunks
from .config.config import Config
from .cutter import cut
from .errors import AnsiCutError
from .text import strip_ansi
from .utils.env_loader import load_env_file
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def demo_text() -> str:
    """Build the colored "Hello World" sample."""
    hello = f"{Fore.BLACK}{Back.WHITE}Hello{Style.RESET_ALL}"
    world = f"{Fore.MAGENTA}{Back.GREEN}World{Style.RESET_ALL}"
    return f"{hello} {world}"


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ansi_cut",
        description="Cut or chunk text containing ANSI color codes",
    )
    parser.add_argument("--plain", action="store_true", help="print results without escapes")
    parser.add_argument("--repr", action="store_true", help="print results with repr()")
    subparsers = parser.add_subparsers(dest="command")

    cut_parser = subparsers.add_parser("cut", help="cut a range of visible characters")
    cut_parser.add_argument("text", nargs="?", help="text to cut (defaults to a sample)")
    cut_parser.add_argument("--start", type=int, default=config.demo.start)
    cut_parser.add_argument("--end", type=int, default=config.demo.end)

    chunks_parser = subparsers.add_parser("chunks", help="split into fixed-width chunks")
    chunks_parser.add_argument("text", nargs="?", help="text to split (defaults to a sample)")
    chunks_parser.add_argument("--width", type=int, default=config.demo.width)

    return parser


def run(argv: list[str] | None = None) -> int:
    """Run the demo and return the exit status."""
    load_env_file()
    config = Config.load()
    setup_logging(config.log.level, config.log.format, config.log.file)

    args = build_parser(config).parse_args(argv)
    command = args.command or "cut"
    text = getattr(args, "text", None) or demo_text()

    def show(value: str) -> None:
        if args.plain:
            value = strip_ansi(value)
        print(repr(value) if args.repr else value)

    just_fix_windows_console()
    show(text)
    try:
        if command == "chunks":
            for part in chunks(text, getattr(args, "width", config.demo.width)):
                show(part)
        else:
            start = getattr(args, "start", config.demo.start)
            end = getattr(args, "end", config.demo.end)
            show(cut(text, start, end))
    except AnsiCutError as e:
        logger.error(f"Error running {command}: {e}")
        return 2
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
