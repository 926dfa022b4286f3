"""OAuth client-credentials token provider."""

from __future__ import annotations

import logging

import httpx
import orjson

from chunked_asr.errors import CredentialError

logger = logging.getLogger(__name__)


class OAuthTokenProvider:
    """Exchange an access key/secret pair for a bearer token.

    The token endpoint answers ``{"access_token": "...", "expires_in": ...}`` or
    ``{"error": "...", "error_description": "..."}``.
    """

    def __init__(
        self,
        token_url: str,
        *,
        timeout_s: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._token_url = token_url
        self._timeout_s = float(timeout_s)
        self._client = client

    def _post(self, params: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.post(self._token_url, params=params)
        with httpx.Client(timeout=self._timeout_s) as client:
            return client.post(self._token_url, params=params)

    def get_token(self, key_id: str, key_secret: str) -> str:
        if not key_id or not key_secret:
            raise CredentialError(reason="access key and secret key are required")

        params = {
            "grant_type": "client_credentials",
            "client_id": key_id,
            "client_secret": key_secret,
        }
        try:
            response = self._post(params)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise CredentialError(reason=f"token request failed: {exc}") from exc

        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise CredentialError(reason="token response is not JSON") from exc

        token = body.get("access_token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            detail = body.get("error_description") or body.get("error") if isinstance(body, dict) else None
            raise CredentialError(reason=f"no access_token in response: {detail or 'unknown error'}")

        logger.info("token: issued, expires_in=%s", body.get("expires_in"))
        return token


__all__ = ["OAuthTokenProvider"]
