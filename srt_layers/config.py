"""Configuration defaults, import options, and .env loading.

WHY: Words per layer, display font, and input encoding used to be
constants edited at the top of a host script. As explicit options they
can differ per call (CLI run, API request) without one configuration
leaking into another.

HOW: python-dotenv loads the .env file on import. Defaults are read from
environment variables into module-level constants. ImportOptions bundles
the per-run choices and is passed explicitly to whatever needs them.

RULES:
- Every default can be overridden via an SRT_LAYERS_* environment variable
- group_size is always coerced to an int >= 1
- An empty font name means "keep the host's default font"
- The core (parser, chunker) never imports this module
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

from srt_layers.core.chunker import coerce_group_size

# Load .env from the project root (where the tool is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Import defaults
# ---------------------------------------------------------------------------

DEFAULT_GROUP_SIZE = coerce_group_size(os.getenv("SRT_LAYERS_GROUP_SIZE", "3"))
DEFAULT_FONT_NAME = os.getenv("SRT_LAYERS_FONT_NAME", "").strip()
DEFAULT_ENCODING = os.getenv("SRT_LAYERS_ENCODING", "utf-8")

SRT_EXTENSIONS: set[str] = {".srt"}
"""Subtitle file extensions accepted by the CLI and the API (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Composition defaults (used when no host composition is available)
# ---------------------------------------------------------------------------


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


DEFAULT_COMP_WIDTH = int(_env_float("SRT_LAYERS_COMP_WIDTH", 1920))
DEFAULT_COMP_HEIGHT = int(_env_float("SRT_LAYERS_COMP_HEIGHT", 1080))
DEFAULT_COMP_DURATION = _env_float("SRT_LAYERS_COMP_DURATION", 0.0)


@dataclass
class ImportOptions:
    """Per-run options for turning an SRT file into layers.

    RULES:
    - group_size: words per chunk (coerced on construction)
    - font_name: display font, or None for the host default
    - encoding: text encoding of the input file
    """

    group_size: int = DEFAULT_GROUP_SIZE
    font_name: Optional[str] = DEFAULT_FONT_NAME or None
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        self.group_size = coerce_group_size(self.group_size)
        if not self.font_name:
            self.font_name = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "ImportOptions":
        """Build options from environment defaults, applying non-None overrides."""
        values = {
            "group_size": DEFAULT_GROUP_SIZE,
            "font_name": DEFAULT_FONT_NAME,
            "encoding": DEFAULT_ENCODING,
        }
        for key, value in overrides.items():
            if key not in values:
                raise TypeError("Unknown import option '{}'".format(key))
            if value is not None:
                values[key] = value
        return cls(**values)
