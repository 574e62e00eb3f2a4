"""Chunked SRT formatter — every word group as its own subtitle cue.

WHY: Not every editor has a scripting host. Most of them import SRT,
so writing the chunks back out as a re-timed SRT file gives the same
word-group rhythm in any tool.

HOW: Each chunk becomes one numbered SRT block with ``HH:MM:SS,mmm``
timecodes. Blocks are separated by a blank line.

RULES:
- Numbering starts at 1 and follows chunk order
- Times are rounded to whole milliseconds; negative times print as zero
- No chunks → empty string
- Suffix: -chunks.srt, media type application/x-subrip
"""

from __future__ import annotations

from typing import List

from srt_layers.core.ir import ChunkedSubtitles
from srt_layers.formatters.base import BaseFormatter, FormatterOutput


def format_timecode(seconds: float) -> str:
    """Format seconds as an SRT timecode, e.g. 3723.5 → ``01:02:03,500``."""
    millis = max(0, int(round(seconds * 1000)))
    hours, millis = divmod(millis, 3_600_000)
    minutes, millis = divmod(millis, 60_000)
    secs, millis = divmod(millis, 1000)
    return "{:02d}:{:02d}:{:02d},{:03d}".format(hours, minutes, secs, millis)


class SRTChunksFormatter(BaseFormatter):
    """Formatter that writes the chunks as a standard SRT file."""

    suffix = "-chunks.srt"

    @property
    def name(self) -> str:
        return "Chunked SRT"

    def format(self, subtitles: ChunkedSubtitles) -> List[FormatterOutput]:
        blocks: List[str] = []
        for number, chunk in enumerate(subtitles.chunks, start=1):
            blocks.append("{}\n{} --> {}\n{}\n".format(
                number,
                format_timecode(chunk.start),
                format_timecode(chunk.end),
                chunk.text,
            ))

        return [FormatterOutput(
            suffix=self.suffix,
            content="\n".join(blocks),
            media_type="application/x-subrip",
        )]
