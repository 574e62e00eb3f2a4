"""Layer Plan formatter — JSON recipe of text layers for a compositing host.

WHY: The host application runs its own scripting runtime, so it cannot
import this package. What it can do is read a JSON file and create one
text layer per entry. This formatter writes exactly that file, with all
timing and styling decisions already made.

HOW: Plans layers with srt_layers.layers.plan_layers(), computes the
composition duration the layers need, serializes the result, and
validates it against the bundled layer_plan_schema.json before
returning.

RULES:
- One entry per chunk, in chunk order, named "Subtitle N"
- composition.duration is extended to last chunk end + 1s when needed
- Output is validated with jsonschema; invalid plans raise
- Suffix: -layers.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import jsonschema

from srt_layers.config import (
    DEFAULT_COMP_DURATION,
    DEFAULT_COMP_HEIGHT,
    DEFAULT_COMP_WIDTH,
    DEFAULT_FONT_NAME,
)
from srt_layers.core.ir import ChunkedSubtitles
from srt_layers.formatters.base import BaseFormatter, FormatterOutput
from srt_layers.layers import CompositionInfo, plan_layers, required_duration

_SCHEMA_PATH = Path(__file__).resolve().parent / "layer_plan_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the layer plan JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


class LayerPlanFormatter(BaseFormatter):
    """Formatter producing a schema-validated JSON layer plan.

    Configurable via constructor: composition size and starting duration,
    and the display font.
    """

    suffix = "-layers.json"

    def __init__(
        self,
        width: int = DEFAULT_COMP_WIDTH,
        height: int = DEFAULT_COMP_HEIGHT,
        duration: float = DEFAULT_COMP_DURATION,
        font_name: Optional[str] = DEFAULT_FONT_NAME or None,
    ) -> None:
        self.composition = CompositionInfo(
            width=int(width),
            height=int(height),
            duration=max(0.0, float(duration)),
        )
        self.font_name = font_name or None

    @property
    def name(self) -> str:
        return "Layer Plan JSON"

    def format(self, subtitles: ChunkedSubtitles) -> List[FormatterOutput]:
        """Convert chunked subtitles into a layer plan JSON file.

        Raises:
            jsonschema.ValidationError: If the generated plan does not
                conform to layer_plan_schema.json.
        """
        plan = plan_layers(subtitles.chunks, self.composition, self.font_name)

        layers: List[dict[str, Any]] = []
        for spec, chunk in zip(plan, subtitles.chunks):
            layers.append({
                "name": spec.name,
                "in_point": spec.in_point,
                "out_point": spec.out_point,
                "text": spec.text,
                "font_size": spec.font_size,
                "leading": spec.leading,
                "justification": spec.justification,
                "position": list(spec.position),
                "font_name": spec.font_name,
                "cue_index": chunk.cue_index,
            })

        output_dict: dict[str, Any] = {
            "source": subtitles.source_filename,
            "group_size": subtitles.group_size,
            "composition": {
                "width": self.composition.width,
                "height": self.composition.height,
                "duration": required_duration(
                    subtitles.chunks, self.composition.duration
                ),
            },
            "layers": layers,
        }

        jsonschema.validate(instance=output_dict, schema=_get_schema())

        return [FormatterOutput(
            suffix=self.suffix,
            content=json.dumps(output_dict, indent=2, ensure_ascii=False),
            media_type="application/json",
        )]
