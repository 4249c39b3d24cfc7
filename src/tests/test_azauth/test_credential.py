from __future__ import annotations

import time

import pytest
from azure.core.credentials import AccessToken

from azauth.authentication import AzureAuthentication
from azauth.credential import (
    ManagedIdentityTokenCredential,
    ServicePrincipalCredential,
    to_access_token,
)
from azauth.errors import AuthenticationFailedError
from azauth.transport import TransportResponse


def test_to_access_token__expires_on_string() -> None:
    token = to_access_token({"access_token": "abcdef", "expires_on": "1700000000"})
    assert token == AccessToken("abcdef", 1700000000)


def test_to_access_token__expires_in(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "time", lambda: 1000.0)
    token = to_access_token({"access_token": "abcdef", "expires_in": "3599"})
    assert token.expires_on == 4599


@pytest.mark.parametrize("payload", [{}, {"access_token": ""}, "not json"])
def test_to_access_token__missing_token_raises(payload) -> None:
    with pytest.raises(AuthenticationFailedError, match="did not contain an access token"):
        to_access_token(payload)


def test_service_principal_credential__scope_to_resource(transport) -> None:
    transport.response = TransportResponse(
        200, {"access_token": "abcdef", "expires_on": "1700000000"}
    )
    auth = AzureAuthentication(transport=transport, environ={})
    credential = ServicePrincipalCredential("aaaa", "abcdefg", "bbbb", authentication=auth)

    token = credential.get_token("https://vault.azure.net/.default")

    assert token.token == "abcdef"
    assert token.expires_on == 1700000000
    assert transport.last_call["data"].startswith("resource=https://vault.azure.net&")
    assert transport.last_call["uri"].endswith("/bbbb/oauth2/token")


def test_service_principal_credential__tenant_override(transport) -> None:
    transport.response = TransportResponse(200, {"access_token": "a", "expires_on": 1})
    auth = AzureAuthentication(transport=transport, environ={})
    credential = ServicePrincipalCredential(
        "aaaa", "abcdefg", "bbbb", environment="azureGermany", authentication=auth
    )

    credential.get_token("https://vault.microsoftazure.de/.default", tenant_id="cccc")

    assert transport.last_call["uri"] == "https://login.microsoftonline.de/cccc/oauth2/token"


def test_service_principal_credential__one_request_per_call(transport) -> None:
    transport.response = TransportResponse(200, {"access_token": "a", "expires_on": 1})
    auth = AzureAuthentication(transport=transport, environ={})
    credential = ServicePrincipalCredential("aaaa", "abcdefg", "bbbb", authentication=auth)

    credential.get_token("https://vault.azure.net/.default")
    credential.get_token("https://vault.azure.net/.default")

    assert transport.call_count == 2


def test_credential__requires_single_scope(transport) -> None:
    auth = AzureAuthentication(transport=transport, environ={})
    credential = ServicePrincipalCredential("aaaa", "abcdefg", "bbbb", authentication=auth)

    with pytest.raises(ValueError, match="Exactly one scope"):
        credential.get_token("https://a.example/.default", "https://b.example/.default")
    assert transport.call_count == 0


def test_managed_identity_credential__user_assigned(transport, msi_environ) -> None:
    transport.response = TransportResponse(
        200, {"access_token": "abcdef", "expires_on": "1700000000"}
    )
    auth = AzureAuthentication(transport=transport, environ=msi_environ)
    credential = ManagedIdentityTokenCredential("12345", authentication=auth)

    token = credential.get_token("https://storage.azure.com/.default")

    assert token == AccessToken("abcdef", 1700000000)
    uri = transport.last_call["uri"]
    assert "resource=https://storage.azure.com&clientid=12345&" in uri


@pytest.mark.parametrize(
    ("expires_on", "expected"),
    [
        ("09/14/2017 00:00:00 PM +00:00", 1505347200),
        ("09/14/2017 03:30:00 PM +00:00", 1505403000),
        ("09/14/2017 13:00:00 PM +00:00", 1505394000),
    ],
)
def test_to_access_token__app_service_date(expires_on: str, expected: int) -> None:
    token = to_access_token({"access_token": "abc", "expires_on": expires_on})
    assert token.expires_on == expected


def test_to_access_token__unparsable_date_uses_expires_in(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(time, "time", lambda: 1000.0)
    token = to_access_token(
        {"access_token": "abc", "expires_on": "tomorrow", "expires_in": "60"}
    )
    assert token.expires_on == 1060


def test_managed_identity_credential__app_service_response(
    transport, msi_environ
) -> None:
    transport.response = TransportResponse(
        200, {"access_token": "abc", "expires_on": "09/14/2017 00:00:00 PM +00:00"}
    )
    auth = AzureAuthentication(transport=transport, environ=msi_environ)

    token = ManagedIdentityTokenCredential(authentication=auth).get_token(
        "https://vault.azure.net/.default"
    )

    assert token == AccessToken("abc", 1505347200)
