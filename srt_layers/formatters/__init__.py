"""Output formatter registry.

WHY: The CLI and the API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["layer_plan"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API fields)
- Values are BaseFormatter subclasses (not instances)
- Every formatter must be constructible with no arguments
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from srt_layers.formatters.layer_plan import LayerPlanFormatter
from srt_layers.formatters.srt_chunks import SRTChunksFormatter

if TYPE_CHECKING:
    from srt_layers.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "layer_plan": LayerPlanFormatter,
    "srt_chunks": SRTChunksFormatter,
}
