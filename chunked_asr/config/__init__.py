"""Configuration module exports (env names and defaults only)."""

from .http import CRLF, CHUNK_TERMINATOR
from .asr import DEFAULT_ASR_RESULT_FIELD
from .buffers import DEFAULT_ASR_BUFFER_SIZE

__all__ = [
    "CHUNK_TERMINATOR",
    "CRLF",
    "DEFAULT_ASR_BUFFER_SIZE",
    "DEFAULT_ASR_RESULT_FIELD",
]
