"""Command-line interface for the TTML lyrics converter.

WHY: Users need a simple way to convert TTML lyric files, or look up
lyrics for a track, from the terminal. The CLI wires together the parser,
the pluggable formatters and the lyrics API client behind one command.

HOW: Uses argparse with two sub-commands. ``convert`` reads a local TTML
file, parses it and saves every selected formatter's output next to the
source (or to --output-dir, or stdout). ``fetch`` runs the async lyrics
client via asyncio.run() and prints or saves the LRC text. Status
messages go to stderr so stdout can be piped.

RULES:
- convert: positional TTML path; --formats is comma-separated (default from config)
- Output naming: {stem}{suffix}, numeric suffix on conflict (-lyrics-2.lrc)
- --stdout prints the first selected format instead of saving files
- A document that yields no lines is an error (exit 1)
- fetch: --title and --artist required, --duration optional (seconds)
- -v/--verbose enables DEBUG logging
- All errors: "Error: ..." on stderr and exit code 1
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from ttml_lyrics.api.client import LyricsClient, LyricsError
from ttml_lyrics.api.models import UNKNOWN_DURATION
from ttml_lyrics.config import DEFAULT_OUTPUT_FORMAT
from ttml_lyrics.core.parser import parse_document
from ttml_lyrics.formatters import FORMATTERS
from ttml_lyrics.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. song-lyrics.lrc)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. song-lyrics-2.lrc)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _select_formats(formats: Optional[str]) -> List[str]:
    """Split and validate the --formats value."""
    raw = formats or DEFAULT_OUTPUT_FORMAT
    format_keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    if not format_keys:
        _fail("No output format selected")
    return format_keys


def _run_convert(args: argparse.Namespace) -> None:
    """Convert a local TTML file with the selected formatters."""
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    format_keys = _select_formats(args.formats)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        markup = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail("Cannot read {}: {}".format(input_path, e))

    lines = parse_document(markup)
    if not lines:
        _fail("No lyric lines found in {}".format(input_path.name))
    _status("Parsed {} lines from {}".format(len(lines), input_path.name))

    if args.stdout:
        formatter = FORMATTERS[format_keys[0]]()
        outputs = formatter.format(lines)
        sys.stdout.write(outputs[0].content)
        return

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        logger.debug("Running %s formatter", formatter.name)
        for output in formatter.format(lines):
            saved_path = _save_output(output, input_path.stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


async def _fetch_lyrics(args: argparse.Namespace) -> str:
    async with LyricsClient() as client:
        return await client.get_lyrics(args.title, args.artist, args.duration)


def _run_fetch(args: argparse.Namespace) -> None:
    """Look up lyrics for a track and print or save them."""
    _status("Fetching lyrics for '{}' by '{}'...".format(args.title, args.artist))
    try:
        lrc_text = asyncio.run(_fetch_lyrics(args))
    except LyricsError as e:
        _fail(str(e))

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(lrc_text, encoding="utf-8")
        _status("Saved: {}".format(output_path))
    else:
        sys.stdout.write(lrc_text)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="ttml_lyrics",
        description="Convert TTML lyrics into karaoke LRC with word timing.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a local TTML file.")
    convert.add_argument("input_file", help="Path to the TTML document.")
    convert.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: {}.".format(
                 ", ".join(sorted(FORMATTERS.keys())), DEFAULT_OUTPUT_FORMAT),
    )
    convert.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )
    convert.add_argument(
        "--stdout",
        action="store_true",
        help="Print the first selected format to stdout instead of saving.",
    )
    convert.set_defaults(handler=_run_convert)

    fetch = subparsers.add_parser("fetch", help="Look up lyrics for a track.")
    fetch.add_argument("--title", required=True, help="Track title.")
    fetch.add_argument("--artist", required=True, help="Track artist.")
    fetch.add_argument(
        "--duration",
        type=int,
        default=UNKNOWN_DURATION,
        help="Track duration in seconds (improves matching).",
    )
    fetch.add_argument(
        "--output",
        default=None,
        help="File to save the LRC text to (default: stdout).",
    )
    fetch.set_defaults(handler=_run_fetch)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
