"""Core pipeline: SRT parsing and time-proportional chunking.

WHY: Parsing and chunking are the only parts with real logic. Keeping
them free of I/O and host concerns makes them trivially testable and
safe to call concurrently.

RULES:
- parse_srt and chunk_cue are pure functions
- ir.py holds the stable contract between the core and its consumers
"""
