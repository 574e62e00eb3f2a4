"""Intermediate representation dataclasses for parsed and chunked subtitles.

WHY: The parser, the chunker and every consumer (layer planner, file
formatters, HTTP API) need to agree on one shape for subtitle data.
Plain dataclasses make that contract explicit and easy to test.

HOW: Three dataclasses form a hierarchy:
  Cue              — one subtitle entry as found in the SRT file
  Chunk            — one word group cut from a cue, with its own timing
  ChunkedSubtitles — the complete result handed to formatters

RULES:
- All times are float seconds
- Cue and Chunk are frozen; nothing downstream mutates them
- Cue.text and Chunk.text are never empty
- Reversed cue times (end < start) are kept as-is, never corrected
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Cue:
    """One subtitle entry parsed from an SRT block.

    RULES:
    - start / end: seconds from the timecode line
    - text: markup stripped, lines joined with single spaces, trimmed
    """

    start: float
    end: float
    text: str

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Chunk:
    """A contiguous group of words from one cue with a proportional time slice.

    RULES:
    - text: words joined by single spaces
    - cue_index: position of the parent cue in the parser output
    - chunks of the same cue share boundaries exactly (end == next start)
    """

    start: float
    end: float
    text: str
    cue_index: int = 0


@dataclass
class ChunkedSubtitles:
    """The complete chunked result of one SRT source.

    WHY: Formatters need the chunks plus a little context (which file they
    came from, which group size produced them) to name and describe their
    output.

    RULES:
    - cues: parser output in source order
    - chunks: chunker output, cue order then chunk order
    - source_filename: original filename (for output naming), may be ""
    """

    cues: list[Cue] = field(default_factory=list)
    chunks: list[Chunk] = field(default_factory=list)
    group_size: int = 1
    source_filename: str = ""

    @property
    def duration_s(self) -> float:
        """End time of the last chunk, or 0.0 when there are none."""
        if not self.chunks:
            return 0.0
        return self.chunks[-1].end
