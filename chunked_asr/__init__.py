"""Streaming speech recognition over a single chunked HTTP POST."""

from .session import RecognitionSession
from .state import TurnPhase, AppSettings, AudioSettings, AuthSettings, BufferSettings
from .errors import (
    AsrError,
    InvalidState,
    CapacityError,
    TransportError,
    CredentialError,
    MissingCredential,
)
from .runtime import StreamingRecognizer, load_settings, configure_logging

__all__ = [
    "AppSettings",
    "AsrError",
    "AudioSettings",
    "AuthSettings",
    "BufferSettings",
    "CapacityError",
    "CredentialError",
    "InvalidState",
    "MissingCredential",
    "RecognitionSession",
    "StreamingRecognizer",
    "TransportError",
    "TurnPhase",
    "configure_logging",
    "load_settings",
]
