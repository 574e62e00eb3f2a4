"""SRT cue parser — loosely formatted subtitle text to Cue records.

WHY: Real-world SRT files are messy: missing index lines, dot instead of
comma before the milliseconds, one- or two-digit fractions, stray HTML
styling, foreign blocks from other tools. The parser has to pull every
usable cue out of such input without ever failing on a single bad block.

HOW: The text is split into blocks on blank lines. In each block the
first three lines are searched for a timecode range; the lines after it
become the cue text, with markup tags stripped. Blocks without a
timecode or without text are skipped.

RULES:
- Line endings are normalized before splitting
- Two or more consecutive newlines always end a block
- Only line indexes 0, 1 and 2 are searched for the timecode line
- Fractions are right-padded to milliseconds: ",5" means 500 ms
- Markup tags <...> are removed, including one left open at the end
- Skipped blocks are logged at DEBUG level, never raised
- Only non-text input raises (TypeError)
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

from srt_layers.core.ir import Cue
from srt_layers.core.source import decode_srt_bytes, normalize_line_endings

logger = logging.getLogger(__name__)

# Lines at index 0, 1 and 2: optional cue number, then the timecode line.
TIMECODE_SEARCH_LINES = 3

_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")

_TIMECODE_RANGE_RE = re.compile(
    r"(\d{1,2}:\d{2}:\d{2})[,.](\d{1,3})"
    r"\s*-->\s*"
    r"(\d{1,2}:\d{2}:\d{2})[,.](\d{1,3})"
)

_TAG_RE = re.compile(r"<[^>]*(?:>|$)")


def to_seconds(hms: str, fraction: str) -> float:
    """Convert an ``H:MM:SS`` string and its fractional digits to seconds.

    Examples:
        >>> to_seconds("01:02:03", "5")
        3723.5
        >>> to_seconds("00:00:00", "050")
        0.05
    """
    hours, minutes, seconds = (int(part) for part in hms.split(":"))
    millis = int((fraction + "000")[:3])
    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def strip_tags(text: str) -> str:
    """Remove ``<...>`` markup tags, including an unterminated trailing tag."""
    return _TAG_RE.sub("", text)


def find_timecode_line(lines: List[str]) -> Optional[int]:
    """Return the index of the timecode line within the first three lines.

    Returns None when none of lines 0..2 holds a timecode range.
    """
    for index, line in enumerate(lines[:TIMECODE_SEARCH_LINES]):
        if _TIMECODE_RANGE_RE.search(line):
            return index
    return None


def _parse_block(block: str) -> Optional[Cue]:
    """Parse one trimmed SRT block, or return None if it has to be skipped."""
    lines = block.split("\n")

    time_index = find_timecode_line(lines)
    if time_index is None:
        logger.debug("Skipping block without timecode: %r", lines[0][:40])
        return None

    match = _TIMECODE_RANGE_RE.search(lines[time_index])
    start = to_seconds(match.group(1), match.group(2))
    end = to_seconds(match.group(3), match.group(4))

    text = strip_tags(" ".join(lines[time_index + 1:])).strip()
    if not text:
        logger.debug("Dropping cue %.3f-%.3f with empty text", start, end)
        return None

    return Cue(start=start, end=end, text=text)


def parse_srt(text: Union[str, bytes, bytearray]) -> List[Cue]:
    """Parse SRT content into an ordered list of cues.

    Args:
        text: SRT file content. Bytes are decoded as UTF-8.

    Returns:
        Cues in source order. Malformed blocks are simply absent.

    Raises:
        TypeError: If ``text`` is not str, bytes or bytearray.
    """
    if isinstance(text, (bytes, bytearray)):
        text = decode_srt_bytes(text)
    elif not isinstance(text, str):
        raise TypeError(
            "SRT content must be str or bytes, not {}".format(type(text).__name__)
        )

    cues: List[Cue] = []
    for raw_block in _BLOCK_SPLIT_RE.split(normalize_line_endings(text)):
        block = raw_block.strip()
        if not block:
            continue
        cue = _parse_block(block)
        if cue is not None:
            cues.append(cue)

    logger.debug("Parsed %d cues", len(cues))
    return cues
