from .token import OAuthTokenProvider
from .base import ByteSink, ByteSource, TokenProvider, RequestTransport
from .http_client import HttpChunkedTransport

__all__ = ["ByteSink", "ByteSource", "HttpChunkedTransport", "OAuthTokenProvider", "RequestTransport", "TokenProvider"]
