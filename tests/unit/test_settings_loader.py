from __future__ import annotations

import pytest

from chunked_asr.runtime import load_settings

ENV_NAMES = (
    "ASR_ACCESS_KEY",
    "ASR_SECRET_KEY",
    "ASR_SAMPLE_RATE",
    "ASR_CHANNEL",
    "ASR_DEV_PID",
    "ASR_FORMAT",
    "ASR_CUID",
    "ASR_BUFFER_SIZE",
    "ASR_B64_BUFFER_SIZE",
    "ASR_FRAME_BYTES",
    "ASR_RESULT_FIELD",
    "ASR_ENDPOINT",
    "ASR_TOKEN_URL",
    "ASR_HTTP_TIMEOUT_S",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.auth.access_key == ""
    assert settings.audio.sample_rate == 16000
    assert settings.audio.channel == 1
    assert settings.audio.dev_pid == 1536
    assert settings.audio.format == "pcm"
    assert settings.buffers.staging_capacity == 2048
    assert settings.buffers.b64_capacity == 0
    assert settings.buffers.frame_bytes == 640
    assert settings.http.endpoint == "http://vop.baidu.com/server_api"
    assert settings.http.timeout_s == 30.0
    assert settings.result_field == "result"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASR_ACCESS_KEY", " ak ")
    monkeypatch.setenv("ASR_SECRET_KEY", "sk")
    monkeypatch.setenv("ASR_SAMPLE_RATE", "8000")
    monkeypatch.setenv("ASR_DEV_PID", "1737")
    monkeypatch.setenv("ASR_CUID", "ESP32")
    monkeypatch.setenv("ASR_BUFFER_SIZE", "4096")
    monkeypatch.setenv("ASR_B64_BUFFER_SIZE", "6000")
    monkeypatch.setenv("ASR_FRAME_BYTES", "320")
    monkeypatch.setenv("ASR_ENDPOINT", "http://127.0.0.1:8080/asr")
    monkeypatch.setenv("ASR_HTTP_TIMEOUT_S", "5.5")

    settings = load_settings()
    assert settings.auth.access_key == "ak"
    assert settings.auth.secret_key == "sk"
    assert settings.audio.sample_rate == 8000
    assert settings.audio.dev_pid == 1737
    assert settings.audio.cuid == "ESP32"
    assert settings.buffers.staging_capacity == 4096
    assert settings.buffers.b64_capacity == 6000
    assert settings.buffers.frame_bytes == 320
    assert settings.http.endpoint == "http://127.0.0.1:8080/asr"
    assert settings.http.timeout_s == 5.5


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASR_SAMPLE_RATE", "fast")
    monkeypatch.setenv("ASR_BUFFER_SIZE", "-1")
    monkeypatch.setenv("ASR_B64_BUFFER_SIZE", "-5")
    monkeypatch.setenv("ASR_HTTP_TIMEOUT_S", "0")
    monkeypatch.setenv("ASR_FORMAT", "   ")

    settings = load_settings()
    assert settings.audio.sample_rate == 16000
    assert settings.audio.format == "pcm"
    assert settings.buffers.staging_capacity == 2048
    assert settings.buffers.b64_capacity == 0
    assert settings.http.timeout_s == 30.0


def test_undersized_b64_buffer_is_derived(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASR_BUFFER_SIZE", "2048")
    monkeypatch.setenv("ASR_B64_BUFFER_SIZE", "2000")
    monkeypatch.setenv("ASR_FRAME_BYTES", "0")

    settings = load_settings()
    assert settings.buffers.b64_capacity == 0
    assert settings.buffers.frame_bytes == 640
