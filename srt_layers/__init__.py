"""SRT Layers — subtitle cues to timed word-group layers.

WHY: Motion designers want subtitles as editable text layers in their
compositing host, but a whole SRT cue on one layer is too long for
punchy social captions. This package splits every cue into fixed-size
word groups and gives each group its own proportional slice of the
cue's time range.

HOW: Three-stage pipeline — parse (SRT text to Cue records), chunk (Cue
to timed Chunk records), consume (layer planning, file formatters, CLI,
HTTP API). The parser and chunker are pure and independently testable.

RULES:
- The core never talks to a host application
- All consumers work from the same Chunk sequence
- Configuration is passed explicitly, never read inside the core
"""

__version__ = "0.1.0"
