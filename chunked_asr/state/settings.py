"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    access_key: str
    secret_key: str


@dataclass(frozen=True, slots=True)
class AudioSettings:
    sample_rate: int = 16000
    channel: int = 1
    dev_pid: int = 1536
    format: str = "pcm"
    cuid: str = "chunked-asr"


@dataclass(frozen=True, slots=True)
class BufferSettings:
    staging_capacity: int = 2048
    # 0: derive from staging_capacity.
    b64_capacity: int = 0
    frame_bytes: int = 640


@dataclass(frozen=True, slots=True)
class HttpSettings:
    endpoint: str
    token_url: str
    timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    audio: AudioSettings
    buffers: BufferSettings
    http: HttpSettings
    result_field: str = "result"


__all__ = [
    "AppSettings",
    "AudioSettings",
    "AuthSettings",
    "BufferSettings",
    "HttpSettings",
]
