from __future__ import annotations

import os
from typing import Any, Iterator, Mapping

import pytest

from azauth.transport import TransportResponse

_MANAGED_VARS = [
    "CLIENT_ID",
    "CLIENT_SECRET",
    "TENANT_ID",
    "MSI_ENDPOINT",
    "MSI_SECRET",
    "MSI_CLIENT_ID",
]


@pytest.fixture(autouse=True)
def clear_auth_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove credential and AZAUTH_* vars to prevent cross-test leakage.

    Yields:
        Iterator[None]: Context manager semantics for pytest.
    """
    to_clear = _MANAGED_VARS + [k for k in os.environ if k.upper().startswith("AZAUTH_")]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


class RecordingTransport:
    """Transport stub that records requests and replays a canned answer."""

    def __init__(
        self,
        response: TransportResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or TransportResponse(200, {"access_token": "abcdef"})
        self.error = error
        self.calls: list[dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]

    def _answer(self, **call: Any) -> TransportResponse:
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        return self.response

    def get(
        self, uri: str, *, headers: Mapping[str, str] | None = None
    ) -> TransportResponse:
        return self._answer(method="GET", uri=uri, headers=dict(headers or {}))

    def post(
        self,
        uri: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: str | None = None,
    ) -> TransportResponse:
        return self._answer(
            method="POST", uri=uri, headers=dict(headers or {}), data=data
        )


@pytest.fixture()
def transport() -> RecordingTransport:
    """Transport answering 200 with a minimal token body."""
    return RecordingTransport()


@pytest.fixture()
def sp_environ() -> dict[str, str]:
    return {"CLIENT_ID": "aaaa", "CLIENT_SECRET": "abcdefg", "TENANT_ID": "bbbb"}


@pytest.fixture()
def msi_environ() -> dict[str, str]:
    return {"MSI_ENDPOINT": "http://localhost:44343/msi/token", "MSI_SECRET": "abcdefg"}
