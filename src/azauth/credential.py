"""``azure.core`` credential adapters over the token flows.

Each ``get_token`` call performs one request; tokens are not cached.
"""

from __future__ import annotations

import calendar
import logging
import time
from typing import Any, Mapping

from azure.core.credentials import AccessToken

from .authentication import AzureAuthentication
from .config import AuthOptions
from .constants import Environment
from .errors import AuthenticationFailedError
from .scopes import resource_from_scope

logger = logging.getLogger(__name__)


def _single_resource(scopes: tuple[str, ...]) -> str:
    if len(scopes) != 1:
        raise ValueError("Exactly one scope must be requested.")
    return resource_from_scope(scopes[0])


# App Service answers with "MM/DD/YYYY hh:mm:ss AM +00:00" on api-version 2017-09-01.
_APP_SERVICE_UTC_SUFFIX = " +00:00"
_APP_SERVICE_FORMATS = ("%m/%d/%Y %I:%M:%S %p", "%m/%d/%Y %H:%M:%S %p")


def _parse_app_service_expires_on(value: str) -> int | None:
    if not value.endswith(_APP_SERVICE_UTC_SUFFIX):
        return None
    date_string = value[: -len(_APP_SERVICE_UTC_SUFFIX)]
    for format_string in _APP_SERVICE_FORMATS:
        try:
            return calendar.timegm(time.strptime(date_string, format_string))
        except ValueError:
            continue
    return None


def _expires_on(payload: Mapping[str, Any]) -> int:
    value = payload.get("expires_on")
    if value is not None:
        try:
            return int(value)
        except ValueError:
            parsed = _parse_app_service_expires_on(str(value))
            if parsed is not None:
                return parsed
            logger.debug("Unrecognized expires_on %r, using expires_in.", value)
    return int(time.time()) + int(payload.get("expires_in", 0))


def to_access_token(payload: Any) -> AccessToken:
    """Convert a token response body into an :class:`AccessToken`.

    ``expires_on`` is read as epoch seconds (v1 authority responses) or as
    the App Service date string; otherwise the expiry is derived from
    ``expires_in``.

    Raises:
        AuthenticationFailedError: If the body has no access token.
    """
    if not isinstance(payload, Mapping) or not payload.get("access_token"):
        raise AuthenticationFailedError(
            "Token response did not contain an access token.", body=payload
        )
    return AccessToken(payload["access_token"], _expires_on(payload))


class ServicePrincipalCredential:
    """TokenCredential authenticating with a service principal secret."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        tenant_id: str | None = None,
        *,
        environment: Environment | str | None = None,
        authentication: AzureAuthentication | None = None,
    ) -> None:
        """Initialize the credential.

        Args:
            client_id: Client ID. Falls back to ``CLIENT_ID``.
            client_secret: Client secret. Falls back to ``CLIENT_SECRET``.
            tenant_id: Tenant ID. Falls back to ``TENANT_ID``.
            environment: Cloud to authenticate against.
            authentication: Authenticator to use; a default one is created
                when omitted.
        """
        self._client_id = client_id
        self._client_secret = client_secret
        self._tenant_id = tenant_id
        self._environment = environment
        self._authentication = authentication or AzureAuthentication()

    def get_token(
        self,
        *scopes: str,
        claims: str | None = None,
        tenant_id: str | None = None,
        **kwargs: Any,
    ) -> AccessToken:
        resource = _single_resource(scopes)
        options = AuthOptions(resource=resource, environment=self._environment)
        payload = self._authentication.authenticate_with_service_principal(
            self._client_id,
            self._client_secret,
            tenant_id or self._tenant_id,
            options,
        )
        return to_access_token(payload)


class ManagedIdentityTokenCredential:
    """TokenCredential authenticating through the MSI endpoint."""

    def __init__(
        self,
        client_id: str | None = None,
        *,
        authentication: AzureAuthentication | None = None,
    ) -> None:
        self._client_id = client_id
        self._authentication = authentication or AzureAuthentication()

    def get_token(
        self,
        *scopes: str,
        claims: str | None = None,
        tenant_id: str | None = None,
        **kwargs: Any,
    ) -> AccessToken:
        resource = _single_resource(scopes)
        if tenant_id:
            logger.warning("tenant_id is ignored for managed identity tokens.")
        options = AuthOptions(resource=resource, client_id=self._client_id)
        return to_access_token(self._authentication.authenticate_with_msi(options))
