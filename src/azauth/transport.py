from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

import requests

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and decoded body of an HTTP response."""

    status_code: int
    body: Any


class Transport(Protocol):
    """Protocol for the HTTP client used to reach identity endpoints.

    Implementations return a :class:`TransportResponse` for every HTTP
    answer, whatever its status, and raise on network-level failures.
    """

    def get(
        self, uri: str, *, headers: Mapping[str, str] | None = None
    ) -> TransportResponse:
        """Issue a GET request."""
        raise NotImplementedError

    def post(
        self,
        uri: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: str | None = None,
    ) -> TransportResponse:
        """Issue a POST request with a pre-encoded body."""
        raise NotImplementedError


def _decode_body(response: requests.Response) -> Any:
    # JSON when the server sends JSON, raw text otherwise
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class RequestsTransport:
    """Transport backed by :mod:`requests`."""

    def __init__(
        self, timeout: float = 30.0, session: requests.Session | None = None
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Seconds to wait for the server before giving up.
            session: Optional session to reuse connections and adapters.
        """
        self.timeout = timeout
        self._session = session or requests.Session()

    def get(
        self, uri: str, *, headers: Mapping[str, str] | None = None
    ) -> TransportResponse:
        response = self._session.get(
            uri, headers=dict(headers or {}), timeout=self.timeout
        )
        logger.debug("GET %s returned %s", response.url, response.status_code)
        return TransportResponse(response.status_code, _decode_body(response))

    def post(
        self,
        uri: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: str | None = None,
    ) -> TransportResponse:
        response = self._session.post(
            uri, headers=dict(headers or {}), data=data, timeout=self.timeout
        )
        logger.debug("POST %s returned %s", response.url, response.status_code)
        return TransportResponse(response.status_code, _decode_body(response))
