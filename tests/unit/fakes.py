"""In-memory collaborators for driving a session without a network."""

from __future__ import annotations

from collections.abc import Mapping


def parse_chunked(data: bytes) -> list[bytes]:
    """Split a complete chunked body into payloads; asserts it is well-formed."""
    payloads: list[bytes] = []
    pos = 0
    while True:
        eol = data.index(b"\r\n", pos)
        size = int(data[pos:eol], 16)
        pos = eol + 2
        if size == 0:
            assert data[pos:] == b"\r\n"
            return payloads
        payloads.append(data[pos : pos + size])
        assert data[pos + size : pos + size + 2] == b"\r\n"
        pos += size + 2


class FakeSink:
    def __init__(self, *, fail_on_call: int | None = None, short_on_call: int | None = None) -> None:
        self.writes: list[bytes] = []
        self.calls = 0
        self._fail_on_call = fail_on_call
        self._short_on_call = short_on_call

    @property
    def data(self) -> bytes:
        return b"".join(self.writes)

    def write(self, data: bytes) -> int:
        self.calls += 1
        if self._fail_on_call is not None and self.calls == self._fail_on_call:
            raise OSError("connection reset by peer")
        if self._short_on_call is not None and self.calls == self._short_on_call:
            self.writes.append(bytes(data[:1]))
            return 1
        self.writes.append(bytes(data))
        return len(data)


class FakeSource:
    def __init__(self, body: bytes, *, piece: int = 7, error: Exception | None = None) -> None:
        self._body = body
        self._piece = piece
        self._error = error
        self.reads: list[int] = []

    def read(self, size: int) -> bytes:
        self.reads.append(size)
        if self._error is not None:
            raise self._error
        n = min(size, self._piece)
        out, self._body = self._body[:n], self._body[n:]
        return out


class FakeTransport(FakeSink):
    def __init__(self, response: bytes = b'{"result":["ok"]}', **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self.headers: dict[str, str] | None = None
        self.closed = False
        self._source = FakeSource(response)

    def open(self, headers: Mapping[str, str]) -> None:
        self.headers = dict(headers)

    def read(self, size: int) -> bytes:
        return self._source.read(size)

    def close(self) -> None:
        self.closed = True


class FakeTokenProvider:
    def __init__(self, token: str = "T1", *, error: Exception | None = None) -> None:
        self.token = token
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def get_token(self, key_id: str, key_secret: str) -> str:
        self.calls.append((key_id, key_secret))
        if self.error is not None:
            raise self.error
        return self.token


__all__ = [
    "FakeSink",
    "FakeSource",
    "FakeTokenProvider",
    "FakeTransport",
    "parse_chunked",
]
