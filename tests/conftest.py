"""Shared test fixtures for the srt_layers test suite.

WHY: Parser, chunker, formatter, CLI and API tests all need the same
handful of SRT samples. Centralizing them here keeps every test module
working from identical input.

HOW: Module-level constants hold the raw SRT text; pytest fixtures hand
out the text, the parsed cues, and a ChunkedSubtitles built from them.

RULES:
- SAMPLE_SRT is a clean, standard three-cue file
- MESSY_SRT mixes CRLF endings, missing indexes, tags and junk blocks
- QUICK_FOX_SRT is the single-cue reference example (group size 2)
"""

from typing import List

import pytest

from srt_layers.core.ir import ChunkedSubtitles, Cue
from srt_layers.core.pipeline import build_chunked_subtitles

# ---------------------------------------------------------------------------
# Sample SRT documents
# ---------------------------------------------------------------------------

QUICK_FOX_SRT = "1\n00:00:01,000 --> 00:00:04,000\nthe quick brown fox jumps\n"

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:04,000\n"
    "the quick brown fox jumps\n"
    "\n"
    "2\n"
    "00:00:04,500 --> 00:00:06,000\n"
    "over the\n"
    "lazy dog\n"
    "\n"
    "3\n"
    "00:00:07,000 --> 00:00:08,200\n"
    "<i>Done.</i>\n"
)

MESSY_SRT = (
    "\ufeff1\r\n"
    "00:00:01.5 --> 00:00:02.75\r\n"
    "<b>Hello</b>   there\r\n"
    "\r\n"
    "\r\n"
    "\r\n"
    "0:00:03,000-->0:00:04,000\r\n"
    "no index line\r\n"
    "\r\n"
    "WEBVTT note block without timing\r\n"
    "\r\n"
    "3\r\n"
    "00:00:05,000 --> 00:00:06,000\r\n"
    "<font color=\"red\"></font>\r\n"
    "\r\n"
    "4\r\n"
    "00:00:07,000 --> 00:00:08,000\r\n"
    "last words <unterminated\r\n"
)


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def messy_srt() -> str:
    return MESSY_SRT


@pytest.fixture
def quick_fox_srt() -> str:
    return QUICK_FOX_SRT


@pytest.fixture
def sample_cues() -> List[Cue]:
    """Cues that SAMPLE_SRT parses into."""
    return [
        Cue(start=1.0, end=4.0, text="the quick brown fox jumps"),
        Cue(start=4.5, end=6.0, text="over the lazy dog"),
        Cue(start=7.0, end=8.2, text="Done."),
    ]


@pytest.fixture
def sample_subtitles() -> ChunkedSubtitles:
    """SAMPLE_SRT chunked two words at a time, as if read from episode1.srt."""
    return build_chunked_subtitles(SAMPLE_SRT, 2, "episode1.srt")
