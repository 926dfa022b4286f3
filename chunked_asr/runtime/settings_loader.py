"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from chunked_asr.config.secrets import get_access_key, get_secret_key
from chunked_asr.state.settings import (
    AppSettings,
    AuthSettings,
    HttpSettings,
    AudioSettings,
    BufferSettings,
)
from chunked_asr.config.http import (
    ENV_ASR_ENDPOINT,
    ENV_ASR_TOKEN_URL,
    DEFAULT_ASR_ENDPOINT,
    DEFAULT_ASR_TOKEN_URL,
    ENV_ASR_HTTP_TIMEOUT_S,
    DEFAULT_ASR_HTTP_TIMEOUT_S,
)
from chunked_asr.codec.base64_blocks import encoded_size
from chunked_asr.config.buffers import (
    DEFAULT_FRAME_BYTES,
    ENV_ASR_BUFFER_SIZE,
    ENV_ASR_FRAME_BYTES,
    ENV_ASR_B64_BUFFER_SIZE,
    DEFAULT_ASR_BUFFER_SIZE,
    DEFAULT_ASR_B64_BUFFER_SIZE,
)
from chunked_asr.config.asr import (
    ENV_ASR_CUID,
    ENV_ASR_FORMAT,
    ENV_ASR_CHANNEL,
    ENV_ASR_DEV_PID,
    DEFAULT_ASR_CUID,
    DEFAULT_ASR_FORMAT,
    DEFAULT_ASR_CHANNEL,
    DEFAULT_ASR_DEV_PID,
    ENV_ASR_SAMPLE_RATE,
    ENV_ASR_RESULT_FIELD,
    DEFAULT_ASR_SAMPLE_RATE,
    DEFAULT_ASR_RESULT_FIELD,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _positive_int_env(name: str, default: int) -> int:
    value = _int_env(name, default)
    return value if value > 0 else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(
        access_key=get_access_key(),
        secret_key=get_secret_key(),
    )


def _load_audio_settings() -> AudioSettings:
    return AudioSettings(
        sample_rate=_positive_int_env(ENV_ASR_SAMPLE_RATE, DEFAULT_ASR_SAMPLE_RATE),
        channel=_positive_int_env(ENV_ASR_CHANNEL, DEFAULT_ASR_CHANNEL),
        dev_pid=_int_env(ENV_ASR_DEV_PID, DEFAULT_ASR_DEV_PID),
        format=_str_env(ENV_ASR_FORMAT, DEFAULT_ASR_FORMAT),
        cuid=_str_env(ENV_ASR_CUID, DEFAULT_ASR_CUID),
    )


def _load_buffer_settings() -> BufferSettings:
    staging_capacity = _positive_int_env(ENV_ASR_BUFFER_SIZE, DEFAULT_ASR_BUFFER_SIZE)
    b64_capacity = _int_env(ENV_ASR_B64_BUFFER_SIZE, DEFAULT_ASR_B64_BUFFER_SIZE)
    # Too small to hold a full staging buffer once encoded: derive it instead.
    if b64_capacity < encoded_size(staging_capacity):
        b64_capacity = 0
    return BufferSettings(
        staging_capacity=staging_capacity,
        b64_capacity=b64_capacity,
        frame_bytes=_positive_int_env(ENV_ASR_FRAME_BYTES, DEFAULT_FRAME_BYTES),
    )


def _load_http_settings() -> HttpSettings:
    timeout_s = _float_env(ENV_ASR_HTTP_TIMEOUT_S, DEFAULT_ASR_HTTP_TIMEOUT_S)
    if timeout_s <= 0:
        timeout_s = DEFAULT_ASR_HTTP_TIMEOUT_S
    return HttpSettings(
        endpoint=_str_env(ENV_ASR_ENDPOINT, DEFAULT_ASR_ENDPOINT),
        token_url=_str_env(ENV_ASR_TOKEN_URL, DEFAULT_ASR_TOKEN_URL),
        timeout_s=timeout_s,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        audio=_load_audio_settings(),
        buffers=_load_buffer_settings(),
        http=_load_http_settings(),
        result_field=_str_env(ENV_ASR_RESULT_FIELD, DEFAULT_ASR_RESULT_FIELD),
    )


__all__ = ["load_settings"]
