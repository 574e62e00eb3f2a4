"""FastAPI application exposing SRT chunking and file conversion.

WHY: External clients need an HTTP endpoint to chunk SRT text into timed
word groups, or to convert an uploaded SRT file into one of the output
formats. FastAPI provides automatic OpenAPI documentation and request
validation.

HOW: The work is pure and fast, so every request runs the pipeline
inline: POST /chunks takes SRT text as JSON and returns the chunks,
POST /conversions takes a multipart upload and returns a formatted file.
GET /formats and GET /health cover discovery and liveness.

RULES:
- Error responses use a consistent ErrorResponse schema
- No cues found → 422 "No subtitle cues found in the SRT file."
- Unknown output format or non-.srt upload → 400
- Undecodable upload (wrong encoding) → 422
- group_size is coerced, never rejected
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from srt_layers import __version__
from srt_layers.config import SRT_EXTENSIONS, ImportOptions
from srt_layers.core.ir import ChunkedSubtitles
from srt_layers.core.pipeline import build_chunked_subtitles
from srt_layers.core.source import decode_srt_bytes
from srt_layers.formatters import FORMATTERS
from srt_layers.formatters.layer_plan import LayerPlanFormatter
from srt_layers.server.models import (
    ChunkModel,
    ChunkRequest,
    ChunkResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
)

logger = logging.getLogger(__name__)

NO_CUES_DETAIL = "No subtitle cues found in the SRT file."

app = FastAPI(
    title="SRT Layers API",
    description=(
        "REST API for splitting SRT subtitle cues into fixed-size word groups "
        "with proportional timing, and for converting SRT files into layer "
        "plans or re-timed SRT."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_cues(subtitles: ChunkedSubtitles) -> None:
    if not subtitles.cues:
        raise HTTPException(status_code=422, detail=NO_CUES_DETAIL)


def _validate_file_extension(filename: str) -> None:
    """Raise HTTPException if the file extension is not supported."""
    ext = Path(filename).suffix.lower()
    if ext not in SRT_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type '{}'. Supported formats: {}".format(
                ext, ", ".join(sorted(SRT_EXTENSIONS))
            ),
        )


# ---------------------------------------------------------------------------
# Endpoints: Chunks
# ---------------------------------------------------------------------------


@app.post(
    "/chunks",
    response_model=ChunkResponse,
    tags=["chunks"],
    summary="Split SRT text into timed word groups",
    description=(
        "Parse the SRT content, split every cue into groups of group_size "
        "words, and divide each cue's duration evenly between its groups."
    ),
    responses={
        422: {"model": ErrorResponse, "description": "No subtitle cues found"},
    },
)
async def create_chunks(request: ChunkRequest) -> ChunkResponse:
    options = ImportOptions.from_env(group_size=request.group_size)
    subtitles = build_chunked_subtitles(request.srt, options.group_size)
    _require_cues(subtitles)

    return ChunkResponse(
        group_size=subtitles.group_size,
        cue_count=len(subtitles.cues),
        chunk_count=len(subtitles.chunks),
        duration_s=subtitles.duration_s,
        chunks=[
            ChunkModel(
                start=chunk.start,
                end=chunk.end,
                text=chunk.text,
                cue_index=chunk.cue_index,
            )
            for chunk in subtitles.chunks
        ],
    )


# ---------------------------------------------------------------------------
# Endpoints: Conversions
# ---------------------------------------------------------------------------


@app.post(
    "/conversions",
    tags=["conversions"],
    summary="Convert an uploaded SRT file",
    description=(
        "Upload an SRT file and receive it converted to the requested output "
        "format as a file download."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid file type or output format"},
        422: {"model": ErrorResponse, "description": "Undecodable file or no cues found"},
    },
)
async def create_conversion(
    file: Annotated[
        UploadFile,
        File(description="SRT subtitle file."),
    ],
    output_format: Annotated[
        str,
        Form(description="Output format key. Available: layer_plan, srt_chunks."),
    ] = "layer_plan",
    group_size: Annotated[
        Optional[str],
        Form(description="Words per chunk (coerced to at least 1)."),
    ] = None,
    encoding: Annotated[
        Optional[str],
        Form(description="Text encoding of the uploaded file (default utf-8)."),
    ] = None,
    font_name: Annotated[
        Optional[str],
        Form(description="Display font for the layer plan."),
    ] = None,
) -> Response:
    # Sanitize filename to prevent path traversal
    filename = Path(file.filename or "upload.srt").name
    _validate_file_extension(filename)

    if output_format not in FORMATTERS:
        available = ", ".join(sorted(FORMATTERS.keys()))
        raise HTTPException(
            status_code=400,
            detail="Unknown output format '{}'. Available: {}".format(
                output_format, available
            ),
        )

    options = ImportOptions.from_env(
        group_size=group_size,
        font_name=font_name,
        encoding=encoding,
    )

    content = await file.read()
    try:
        text = decode_srt_bytes(content, options.encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise HTTPException(
            status_code=422,
            detail="Unable to decode file with encoding '{}': {}".format(
                options.encoding, exc
            ),
        )

    subtitles = build_chunked_subtitles(text, options.group_size, filename)
    _require_cues(subtitles)

    if output_format == "layer_plan":
        formatter = LayerPlanFormatter(font_name=options.font_name)
    else:
        formatter = FORMATTERS[output_format]()

    output = formatter.format(subtitles)[0]
    out_filename = "{}{}".format(Path(filename).stem, output.suffix)
    logger.info(
        "Converted %s to %s (%d chunks)", filename, output_format, len(subtitles.chunks)
    )

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(out_filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description=(
        "Returns all supported output formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=formatter.suffix,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the srt-layers-api console script."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
