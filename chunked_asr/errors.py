"""Error taxonomy for a recognition turn."""

from __future__ import annotations

from dataclasses import dataclass


class AsrError(Exception):
    """Base class for every error raised by a recognition turn."""


@dataclass(frozen=True, slots=True)
class CredentialError(AsrError):
    """Raised when an access token cannot be obtained."""

    reason: str

    def __str__(self) -> str:
        return f"credential error: {self.reason}"


@dataclass(frozen=True, slots=True)
class MissingCredential(CredentialError):
    """Raised when the trailer is built without a token."""

    reason: str = "token is absent"


@dataclass(frozen=True, slots=True)
class CapacityError(AsrError):
    """Raised when a frame or its encoded form does not fit its buffer."""

    required: int
    capacity: int
    what: str = "buffer"

    def __str__(self) -> str:
        return f"{self.what} needs {self.required} bytes but capacity is {self.capacity}"


@dataclass(frozen=True, slots=True)
class TransportError(AsrError):
    """Raised on any failed or short write/read."""

    operation: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"transport {self.operation} failed: {self.detail}"
        return f"transport {self.operation} failed"


@dataclass(frozen=True, slots=True)
class InvalidState(AsrError):
    """Raised when a lifecycle event arrives out of order."""

    event: str
    phase: str

    def __str__(self) -> str:
        return f"event {self.event!r} is not allowed in phase {self.phase!r}"


__all__ = [
    "AsrError",
    "CapacityError",
    "CredentialError",
    "InvalidState",
    "MissingCredential",
    "TransportError",
]
