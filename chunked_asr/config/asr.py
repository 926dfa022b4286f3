"""Recognition session configuration (env names and defaults only)."""

from __future__ import annotations

ENV_ASR_SAMPLE_RATE = "ASR_SAMPLE_RATE"
ENV_ASR_CHANNEL = "ASR_CHANNEL"
ENV_ASR_DEV_PID = "ASR_DEV_PID"
ENV_ASR_FORMAT = "ASR_FORMAT"
ENV_ASR_CUID = "ASR_CUID"
ENV_ASR_RESULT_FIELD = "ASR_RESULT_FIELD"

DEFAULT_ASR_SAMPLE_RATE = 16000
DEFAULT_ASR_CHANNEL = 1
# 1536: Mandarin with simple English, near-field model.
DEFAULT_ASR_DEV_PID = 1536
DEFAULT_ASR_FORMAT = "pcm"
DEFAULT_ASR_CUID = "chunked-asr"
DEFAULT_ASR_RESULT_FIELD = "result"

# Server error fields, logged when the result field is absent.
ASR_ERROR_CODE_FIELD = "err_no"
ASR_ERROR_MESSAGE_FIELD = "err_msg"

__all__ = [
    "ASR_ERROR_CODE_FIELD",
    "ASR_ERROR_MESSAGE_FIELD",
    "DEFAULT_ASR_CHANNEL",
    "DEFAULT_ASR_CUID",
    "DEFAULT_ASR_DEV_PID",
    "DEFAULT_ASR_FORMAT",
    "DEFAULT_ASR_RESULT_FIELD",
    "DEFAULT_ASR_SAMPLE_RATE",
    "ENV_ASR_CHANNEL",
    "ENV_ASR_CUID",
    "ENV_ASR_DEV_PID",
    "ENV_ASR_FORMAT",
    "ENV_ASR_RESULT_FIELD",
    "ENV_ASR_SAMPLE_RATE",
]
