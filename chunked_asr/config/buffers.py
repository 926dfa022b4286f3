"""Staging and encoder buffer sizing (env names and defaults only)."""

from __future__ import annotations

ENV_ASR_BUFFER_SIZE = "ASR_BUFFER_SIZE"
ENV_ASR_B64_BUFFER_SIZE = "ASR_B64_BUFFER_SIZE"
ENV_ASR_FRAME_BYTES = "ASR_FRAME_BYTES"

# Raw audio staging capacity. Frames plus the 0-2 carried bytes must fit.
DEFAULT_ASR_BUFFER_SIZE = 2048

# 0 means "derive from the staging capacity" (base64 of a full staging buffer).
DEFAULT_ASR_B64_BUFFER_SIZE = 0

# Raw bytes per streamed frame; 20ms of 16kHz mono PCM16.
DEFAULT_FRAME_BYTES = 640

__all__ = [
    "DEFAULT_ASR_B64_BUFFER_SIZE",
    "DEFAULT_ASR_BUFFER_SIZE",
    "DEFAULT_FRAME_BYTES",
    "ENV_ASR_B64_BUFFER_SIZE",
    "ENV_ASR_BUFFER_SIZE",
    "ENV_ASR_FRAME_BYTES",
]
