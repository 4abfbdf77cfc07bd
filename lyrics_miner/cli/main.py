"""Main CLI entry point for lyrics_miner."""

import argparse
import logging
import sys

from lyrics_miner import __version__
from lyrics_miner.cli.commands import extract
from lyrics_miner.services.export_service import EXPORT_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="lyrics_miner",
        description="Tool for building Japanese vocabulary lists from song lyrics",
        epilog="Use 'lyrics_miner <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every skipped and added word",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lyrics_miner extract [files...]
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract vocabulary from lyrics",
        description="Tokenize Japanese lyrics and list the vocabulary they contain",
    )
    extract_parser.add_argument(
        "files",
        nargs="*",
        help="Lyrics files (.txt, .lrc, .srt, .ass, .ssa, .vtt)",
    )
    extract_parser.add_argument("--text", help="Lyrics passed directly on the command line")
    extract_parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read lyrics from standard input",
    )
    extract_parser.add_argument(
        "--table",
        action="store_true",
        help="Show readings next to each word",
    )
    extract_parser.add_argument(
        "--all",
        action="store_true",
        help="Show every word instead of a preview",
    )
    extract_parser.add_argument(
        "--legacy-collation",
        action="store_true",
        help="Sort by comparing each written form against the other word's reading",
    )
    extract_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the lyrics files",
    )
    extract_parser.add_argument(
        "--tagger-args",
        default="",
        help="Extra arguments passed to MeCab",
    )
    extract_parser.add_argument(
        "--export",
        metavar="PATH",
        help="Write the vocabulary to a file (relative paths land in --export-dir)",
    )
    extract_parser.add_argument(
        "--export-dir",
        metavar="DIR",
        help="Directory for relative --export paths (default: current directory)",
    )
    extract_parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default="csv",
        help="Export format (default: csv)",
    )
    extract_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log every skipped and added word",
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "extract":
        return extract.extract_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
