"""Abstract base formatter and output container.

WHY: Every output format consumes the same ChunkedSubtitles but produces
different file content. This base class enforces a consistent interface
so the CLI and the API can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; single-file formatters return a list of one
- ``suffix`` starts with a hyphen, e.g. ``"-layers.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from srt_layers.core.ir import ChunkedSubtitles


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-layers.json"`` → ``"episode1-layers.json"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format(), name and suffix
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    suffix: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Layer Plan JSON'."""

    @abstractmethod
    def format(self, subtitles: ChunkedSubtitles) -> list[FormatterOutput]:
        """Convert chunked subtitles into one or more output files.

        Args:
            subtitles: Parsed cues, their chunks, and source metadata.

        Returns:
            List of FormatterOutput objects.
        """
