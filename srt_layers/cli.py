"""Command-line interface for SRT Layers.

WHY: Editors need a quick way to turn an SRT file into word-group output
from the terminal, either as a layer plan for a host script or as a
re-timed SRT. The CLI wires together file reading, parsing, chunking,
the pluggable formatters, and file saving behind a single command.

HOW: Uses argparse to accept an input file (or ``-`` for stdin), the
import options (words per layer, font, encoding), composition settings,
output format selection, and output directory. Status messages go to
stderr; output files are saved next to the source (or to --output-dir).

RULES:
- Positional argument: input SRT file path, or ``-`` for stdin
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-layers-2.json)
- No cues found is an error ("No subtitle cues found in the SRT file.")
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from srt_layers.config import (
    DEFAULT_COMP_DURATION,
    DEFAULT_COMP_HEIGHT,
    DEFAULT_COMP_WIDTH,
    SRT_EXTENSIONS,
    ImportOptions,
)
from srt_layers.core.pipeline import build_chunked_subtitles
from srt_layers.core.source import decode_srt_bytes, read_srt_file
from srt_layers.formatters import FORMATTERS
from srt_layers.formatters.base import BaseFormatter, FormatterOutput
from srt_layers.formatters.layer_plan import LayerPlanFormatter

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding a numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. episode1-layers.json)
    - Conflict: insert counter before the extension (episode1-layers-2.json)
    - Counter starts at 2 and increments

    Returns:
        A Path that does not yet exist.
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


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Save a single formatter output to disk as UTF-8 text."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _make_formatter(
    key: str,
    args: argparse.Namespace,
    options: ImportOptions,
) -> BaseFormatter:
    """Instantiate a formatter, passing composition settings where they apply."""
    if key == "layer_plan":
        return LayerPlanFormatter(
            width=args.comp_width,
            height=args.comp_height,
            duration=args.comp_duration,
            font_name=options.font_name,
        )
    return FORMATTERS[key]()


def _parse_format_keys(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(FORMATTERS.keys())
    format_keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the import pipeline for parsed CLI arguments.

    Returns:
        Paths of the saved output files.
    """
    options = ImportOptions.from_env(
        group_size=args.words,
        font_name=args.font,
        encoding=args.encoding,
    )
    format_keys = _parse_format_keys(args.formats)
    if args.comp_width < 1 or args.comp_height < 1:
        _fail("Composition size must be at least 1x1, got {}x{}".format(
            args.comp_width, args.comp_height
        ))

    try:
        if args.input_file == "-":
            text = decode_srt_bytes(sys.stdin.buffer.read(), options.encoding)
            source_name = "stdin.srt"
            default_dir = Path.cwd()
        else:
            input_path = Path(args.input_file).resolve()
            if not input_path.is_file():
                _fail("File not found: {}".format(input_path))
            if input_path.suffix.lower() not in SRT_EXTENSIONS:
                _status("Warning: '{}' does not look like an SRT file".format(input_path.name))
            text = read_srt_file(input_path, options.encoding)
            source_name = input_path.name
            default_dir = input_path.parent
    except (UnicodeDecodeError, LookupError) as e:
        _fail("Unable to read input with encoding '{}': {}".format(options.encoding, e))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else default_dir
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    _status("Parsing {} ({} words per layer)...".format(source_name, options.group_size))
    subtitles = build_chunked_subtitles(text, options.group_size, source_name)
    if not subtitles.cues:
        _fail("No subtitle cues found in the SRT file.")
    _status("  {} cues, {} chunks".format(len(subtitles.cues), len(subtitles.chunks)))

    stem = Path(source_name).stem
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = _make_formatter(key, args, options)
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(subtitles):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="srt_layers",
        description="Split SRT subtitle cues into timed word groups and write "
                    "them as a layer plan (JSON) or a re-timed SRT file.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the SRT file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "-w", "--words",
        default=None,
        help="Words per layer (default: SRT_LAYERS_GROUP_SIZE or 3). "
             "Values below 1 or non-numbers fall back to 1.",
    )

    parser.add_argument(
        "--font",
        default=None,
        help="Display font name for the layer plan (default: host default).",
    )

    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding of the input file (default: utf-8).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--comp-width",
        type=int,
        default=DEFAULT_COMP_WIDTH,
        help="Composition width in pixels (default: %(default)s).",
    )

    parser.add_argument(
        "--comp-height",
        type=int,
        default=DEFAULT_COMP_HEIGHT,
        help="Composition height in pixels (default: %(default)s).",
    )

    parser.add_argument(
        "--comp-duration",
        type=float,
        default=DEFAULT_COMP_DURATION,
        help="Current composition duration in seconds (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped blocks and other details.",
    )

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
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()
