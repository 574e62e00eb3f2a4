"""Host-agnostic layer planning for chunked subtitles.

WHY: The end product is one editable text layer per chunk in a
compositing host. The host API itself is out of reach here, but the
decisions about each layer (name, in/out points, font size, position,
how long the composition must be) are plain arithmetic that deserves
tests. The host side then only has to apply a ready-made plan.

HOW: plan_layers() turns chunks into LayerSpec records using the
composition's size. required_duration() says how long the composition
has to be to hold the last chunk. apply_layers() walks the plan and
calls an injected ``create_unit`` capability once per layer.

RULES:
- Layer names are "Subtitle 1", "Subtitle 2", ... in chunk order
- Font size is max(20, round(height / 15)); leading is 1.05x font size
- Layers are centred in the composition with centre justification
- If the last chunk ends past the composition, it grows to last end + 1s
- apply_layers() is the single writer: one call per layer, in order
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from srt_layers.core.ir import Chunk

logger = logging.getLogger(__name__)

MIN_FONT_SIZE = 20
FONT_SIZE_DIVISOR = 15
LEADING_FACTOR = 1.05
DURATION_PADDING_S = 1.0


@dataclass(frozen=True)
class CompositionInfo:
    """Size and duration of the host composition receiving the layers."""

    width: int
    height: int
    duration: float = 0.0


@dataclass(frozen=True)
class LayerSpec:
    """One planned text layer.

    RULES:
    - in_point / out_point come straight from the chunk's start / end
    - font_name None means "keep the host default"
    - position is (x, y) in composition pixels
    """

    name: str
    in_point: float
    out_point: float
    text: str
    font_size: int
    leading: float
    position: Tuple[float, float]
    justification: str = "center"
    font_name: Optional[str] = None


def font_size_for(height: int) -> int:
    """Font size for a composition height, rounding halves up."""
    return max(MIN_FONT_SIZE, int(math.floor(height / FONT_SIZE_DIVISOR + 0.5)))


def required_duration(chunks: Sequence[Chunk], current: float) -> float:
    """Composition duration needed to hold every chunk.

    Returns ``current`` unless the last chunk ends after it, in which
    case the composition grows to the last end plus one second.
    """
    if not chunks:
        return current
    last_end = chunks[-1].end
    if last_end > current:
        return last_end + DURATION_PADDING_S
    return current


def plan_layers(
    chunks: Sequence[Chunk],
    composition: CompositionInfo,
    font_name: Optional[str] = None,
) -> List[LayerSpec]:
    """Build one LayerSpec per chunk.

    Args:
        chunks: Chunker output, in order.
        composition: Target composition (size drives font and position).
        font_name: Optional display font; empty string is treated as None.

    Returns:
        Layer specs in chunk order.
    """
    font_size = font_size_for(composition.height)
    leading = font_size * LEADING_FACTOR
    centre = (composition.width / 2, composition.height / 2)

    return [
        LayerSpec(
            name="Subtitle {}".format(i + 1),
            in_point=chunk.start,
            out_point=chunk.end,
            text=chunk.text,
            font_size=font_size,
            leading=leading,
            position=centre,
            font_name=font_name or None,
        )
        for i, chunk in enumerate(chunks)
    ]


def apply_layers(
    plan: Sequence[LayerSpec],
    create_unit: Callable[[LayerSpec], Any],
) -> int:
    """Hand every planned layer to the host's create capability.

    RULES:
    - Calls create_unit once per spec, in plan order
    - An exception from create_unit is logged and re-raised; layers
      created before it are left in place for the host to undo

    Returns:
        Number of layers created.
    """
    created = 0
    for spec in plan:
        try:
            create_unit(spec)
        except Exception:
            logger.exception("Failed to create layer %s", spec.name)
            raise
        created += 1
    logger.info("Created %d subtitle layers", created)
    return created
