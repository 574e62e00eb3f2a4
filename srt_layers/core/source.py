"""Helpers for turning SRT files and uploads into parser-ready text.

WHY: SRT files arrive from disk, stdin, or HTTP uploads, in whatever
encoding and line-ending convention the authoring tool used. Timecode
detection and blank-line splitting both depend on a single newline
convention, so every source goes through the same normalization before
reaching the parser.

HOW: decode_srt_bytes() decodes raw bytes with the configured encoding
(stripping a UTF-8 BOM), normalize_line_endings() folds CRLF and lone CR
into LF, and read_srt_file() combines both for a path on disk.

RULES:
- Output text always uses "\\n" line endings
- UTF-8 input may start with a BOM; it is removed
- Decode errors and missing files propagate to the caller
"""

from __future__ import annotations

import codecs
from pathlib import Path


def normalize_line_endings(text: str) -> str:
    """Fold CRLF and lone CR line endings into LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def decode_srt_bytes(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw SRT bytes into normalized text.

    HOW: UTF-8 is read as ``utf-8-sig`` so a leading BOM never ends up in
    the first block. Other encodings are used as given.

    RULES:
    - Raises LookupError for an unknown encoding name
    - Raises UnicodeDecodeError when the bytes do not match the encoding

    Args:
        data: File content as bytes.
        encoding: Codec name, e.g. "utf-8", "cp1252".

    Returns:
        Decoded text with LF line endings.
    """
    codec = codecs.lookup(encoding)
    if codec.name == "utf-8":
        encoding = "utf-8-sig"
    return normalize_line_endings(bytes(data).decode(encoding))


def read_srt_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Read an SRT file from disk and return normalized text.

    RULES:
    - Raises FileNotFoundError if the file doesn't exist
    - Same decoding rules as decode_srt_bytes()
    """
    return decode_srt_bytes(Path(path).read_bytes(), encoding)
