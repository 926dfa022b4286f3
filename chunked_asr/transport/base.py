"""Capability interfaces the recognition session depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from collections.abc import Mapping


@runtime_checkable
class ByteSink(Protocol):
    def write(self, data: bytes) -> int:
        """Write ``data``; return the number of bytes written."""
        ...


@runtime_checkable
class ByteSource(Protocol):
    def read(self, size: int) -> bytes:
        """Read at most ``size`` bytes; ``b""`` means end of body."""
        ...


@runtime_checkable
class TokenProvider(Protocol):
    def get_token(self, key_id: str, key_secret: str) -> str:
        ...


@runtime_checkable
class RequestTransport(ByteSink, ByteSource, Protocol):
    """A single POST exchange: headers, raw body bytes, then the response."""

    def open(self, headers: Mapping[str, str]) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["ByteSink", "ByteSource", "RequestTransport", "TokenProvider"]
