"""Raw HTTP/1.1 POST connection for a pre-framed chunked body.

The session frames every chunk itself, so the connection must pass body bytes
through untouched. High-level clients (httpx, requests) apply their own
chunked framing to streamed bodies, which would double-frame the payload;
``http.client`` exposes the header/body split needed here.
"""

from __future__ import annotations

import logging
import http.client
from urllib.parse import urlsplit
from collections.abc import Mapping

from chunked_asr.errors import TransportError

logger = logging.getLogger(__name__)


class HttpChunkedTransport:
    """One POST request: ``open`` sends headers, ``write`` sends body bytes, ``read`` reads the reply."""

    def __init__(self, url: str, *, timeout_s: float = 30.0) -> None:
        parts = urlsplit(url)
        if parts.scheme not in {"http", "https"} or not parts.hostname:
            raise ValueError(f"unsupported endpoint URL: {url!r}")
        self._url = url
        self._scheme = parts.scheme
        self._host = parts.hostname
        self._port = parts.port
        self._path = (parts.path or "/") + (f"?{parts.query}" if parts.query else "")
        self._timeout_s = float(timeout_s)
        self._conn: http.client.HTTPConnection | None = None
        self._response: http.client.HTTPResponse | None = None

    @property
    def status(self) -> int | None:
        return self._response.status if self._response is not None else None

    def _connect(self) -> http.client.HTTPConnection:
        if self._scheme == "https":
            return http.client.HTTPSConnection(self._host, self._port, timeout=self._timeout_s)
        return http.client.HTTPConnection(self._host, self._port, timeout=self._timeout_s)

    def open(self, headers: Mapping[str, str]) -> None:
        if self._conn is not None:
            raise TransportError(operation="open", detail="connection already open")
        conn = self._connect()
        try:
            conn.putrequest("POST", self._path)
            for name, value in headers.items():
                conn.putheader(name, value)
            conn.endheaders()
        except (OSError, http.client.HTTPException) as exc:
            conn.close()
            raise TransportError(operation="open", detail=f"{self._url}: {exc}") from exc
        self._conn = conn
        logger.debug("http: request headers sent to %s", self._url)

    def write(self, data: bytes) -> int:
        if self._conn is None:
            raise TransportError(operation="write", detail="connection is not open")
        try:
            self._conn.send(data)
        except (OSError, http.client.HTTPException) as exc:
            raise TransportError(operation="write", detail=str(exc)) from exc
        return len(data)

    def read(self, size: int) -> bytes:
        if self._conn is None:
            raise TransportError(operation="read", detail="connection is not open")
        try:
            if self._response is None:
                self._response = self._conn.getresponse()
                logger.info("http: response status=%s", self._response.status)
            return self._response.read(size)
        except (OSError, http.client.HTTPException) as exc:
            raise TransportError(operation="read", detail=str(exc)) from exc

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
        self._conn = None
        self._response = None

    def __enter__(self) -> HttpChunkedTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["HttpChunkedTransport"]
