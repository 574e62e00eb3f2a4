"""Chunker — split cues into fixed-size word groups with proportional timing.

WHY: One layer per full subtitle cue is too much text for short-form
video. Editors want a handful of words on screen at a time, still in
sync with the original cue timing.

HOW: Each cue's text is split on whitespace into words, the words are
cut into groups of ``group_size``, and the cue's duration is divided
evenly between the groups. Group boundaries are computed by direct
multiplication from the cue start, so there is no drift from repeated
addition and neighbouring chunks share the exact same boundary value.

RULES:
- group_size is always coerced to an int >= 1 (never an error)
- One cue yields ceil(word_count / group_size) chunks
- First chunk starts at cue.start, last chunk ends at cue.end
- Zero or negative cue durations pass straight through into the chunks
- A cue with no words yields no chunks
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List

from srt_layers.core.ir import Chunk, Cue

logger = logging.getLogger(__name__)


def coerce_group_size(value: Any) -> int:
    """Coerce any grouping parameter to a positive integer.

    HOW: Numbers and numeric strings are floored. Anything below 1,
    non-finite, boolean, None, or unparseable becomes 1.

    Examples:
        >>> coerce_group_size(3.9)
        3
        >>> coerce_group_size(0)
        1
        >>> coerce_group_size("abc")
        1
    """
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return value if value >= 1 else 1
    if isinstance(value, str):
        try:
            return coerce_group_size(int(value.strip()))
        except ValueError:
            pass
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 1
    if not math.isfinite(number) or number < 1:
        return 1
    return int(math.floor(number))


def chunk_cue(cue: Cue, group_size: Any, cue_index: int = 0) -> List[Chunk]:
    """Split one cue into timed word groups.

    Args:
        cue: The cue to split.
        group_size: Words per chunk; coerced with coerce_group_size().
        cue_index: Index stamped on every produced chunk.

    Returns:
        Chunks in time order. Empty if the cue text has no words.
    """
    size = coerce_group_size(group_size)
    words = cue.text.split()
    if not words:
        return []

    chunk_count = -(-len(words) // size)
    chunk_duration = cue.duration / chunk_count

    chunks: List[Chunk] = []
    for c in range(chunk_count):
        chunks.append(Chunk(
            start=cue.start + c * chunk_duration,
            end=cue.start + (c + 1) * chunk_duration,
            text=" ".join(words[c * size:(c + 1) * size]),
            cue_index=cue_index,
        ))
    return chunks


def chunk_cues(cues: Iterable[Cue], group_size: Any) -> List[Chunk]:
    """Chunk every cue in order and flatten the result."""
    size = coerce_group_size(group_size)
    chunks: List[Chunk] = []
    for index, cue in enumerate(cues):
        chunks.extend(chunk_cue(cue, size, cue_index=index))
    logger.debug("Produced %d chunks (group size %d)", len(chunks), size)
    return chunks
