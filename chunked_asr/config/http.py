"""HTTP endpoint configuration (env names and defaults only)."""

from __future__ import annotations

ENV_ASR_ENDPOINT = "ASR_ENDPOINT"
ENV_ASR_TOKEN_URL = "ASR_TOKEN_URL"
ENV_ASR_HTTP_TIMEOUT_S = "ASR_HTTP_TIMEOUT_S"

DEFAULT_ASR_ENDPOINT = "http://vop.baidu.com/server_api"
DEFAULT_ASR_TOKEN_URL = "https://openapi.baidu.com/oauth/2.0/token"
DEFAULT_ASR_HTTP_TIMEOUT_S = 30.0

CONTENT_TYPE_JSON = "application/json"

# Chunked framing
CRLF = b"\r\n"
CHUNK_TERMINATOR = b"0\r\n\r\n"

__all__ = [
    "CHUNK_TERMINATOR",
    "CONTENT_TYPE_JSON",
    "CRLF",
    "DEFAULT_ASR_ENDPOINT",
    "DEFAULT_ASR_HTTP_TIMEOUT_S",
    "DEFAULT_ASR_TOKEN_URL",
    "ENV_ASR_ENDPOINT",
    "ENV_ASR_HTTP_TIMEOUT_S",
    "ENV_ASR_TOKEN_URL",
]
