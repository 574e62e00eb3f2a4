"""HTTP API for SRT Layers.

WHY: Host-side scripts and automation tools (n8n, curl, small web
frontends) want chunked subtitles without installing Python. A FastAPI
app exposes the same pipeline as the CLI over HTTP.

RULES:
- Requests are processed synchronously; there is no job store
- Run with ``srt-layers-api`` or ``uvicorn srt_layers.server.app:app``
"""
