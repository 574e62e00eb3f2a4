"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own model. All models include Field
descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- group_size accepts any number or string; it is coerced, never rejected
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ChunkRequest(BaseModel):
    """SRT text to split into timed word groups."""

    srt: str = Field(description="SRT file content.")
    group_size: Optional[Union[int, float, str]] = Field(
        default=None,
        description=(
            "Words per chunk. Floored and clamped to at least 1. "
            "Defaults to the server's configured group size."
        ),
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "srt": "1\n00:00:01,000 --> 00:00:04,000\nthe quick brown fox jumps\n",
                "group_size": 2,
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ChunkModel(BaseModel):
    """One timed word group."""

    start: float = Field(description="Start time in seconds.")
    end: float = Field(description="End time in seconds.")
    text: str = Field(description="Words of this chunk joined by single spaces.")
    cue_index: int = Field(description="Index of the source cue in parser order.")


class ChunkResponse(BaseModel):
    """Result of chunking an SRT document.

    RULES:
    - group_size is the effective (coerced) value
    - chunks are ordered by cue, then by time within the cue
    """

    group_size: int = Field(description="Effective words per chunk.")
    cue_count: int = Field(description="Number of cues parsed from the input.")
    chunk_count: int = Field(description="Number of chunks produced.")
    duration_s: float = Field(description="End time of the last chunk in seconds.")
    chunks: List[ChunkModel] = Field(description="Timed word groups.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "group_size": 2,
                "cue_count": 1,
                "chunk_count": 3,
                "duration_s": 4.0,
                "chunks": [
                    {"start": 1.0, "end": 2.0, "text": "the quick", "cue_index": 0},
                    {"start": 2.0, "end": 3.0, "text": "brown fox", "cue_index": 0},
                    {"start": 3.0, "end": 4.0, "text": "jumps", "cue_index": 0},
                ],
            }
        ]
    }}


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-layers.json').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
