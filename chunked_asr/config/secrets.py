"""Secrets and authentication configuration."""

from __future__ import annotations

import os

ENV_ASR_ACCESS_KEY = "ASR_ACCESS_KEY"
ENV_ASR_SECRET_KEY = "ASR_SECRET_KEY"


def get_access_key() -> str:
    return (os.getenv(ENV_ASR_ACCESS_KEY) or "").strip()


def get_secret_key() -> str:
    return (os.getenv(ENV_ASR_SECRET_KEY) or "").strip()


__all__ = ["ENV_ASR_ACCESS_KEY", "ENV_ASR_SECRET_KEY", "get_access_key", "get_secret_key"]
