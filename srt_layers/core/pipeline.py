"""One-call parse + chunk pipeline shared by the CLI and the HTTP API.

WHY: Both entry points need the same "SRT text in, ChunkedSubtitles out"
step. Keeping it here avoids two slightly different copies of the same
wiring.

RULES:
- Never raises for empty results; callers decide how to report them
"""

from __future__ import annotations

from typing import Any, Union

from srt_layers.core.chunker import chunk_cues, coerce_group_size
from srt_layers.core.ir import ChunkedSubtitles
from srt_layers.core.parser import parse_srt


def build_chunked_subtitles(
    text: Union[str, bytes],
    group_size: Any,
    source_filename: str = "",
) -> ChunkedSubtitles:
    """Parse SRT content and chunk every cue.

    Args:
        text: SRT content (see parse_srt for accepted types).
        group_size: Words per chunk, coerced to an int >= 1.
        source_filename: Original filename, carried along for formatters.

    Returns:
        ChunkedSubtitles with cues, chunks and the effective group size.
    """
    size = coerce_group_size(group_size)
    cues = parse_srt(text)
    return ChunkedSubtitles(
        cues=cues,
        chunks=chunk_cues(cues, size),
        group_size=size,
        source_filename=source_filename,
    )
