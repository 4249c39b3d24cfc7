from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

from .config import (
    AuthOptions,
    AuthSettings,
    ManagedIdentityEnvironment,
    ServicePrincipalEnvironment,
)
from .constants import (
    CLIENT_CREDENTIALS_GRANT,
    FORM_CONTENT_TYPE,
    MSI_API_VERSION,
    Environment,
)
from .errors import (
    AuthenticationFailedError,
    MissingCredentialsError,
    MissingMSIConfigError,
    MSIAuthenticationFailedError,
)
from .legacy import (
    ExplicitCredentials,
    OptionsLike,
    OptionsOnly,
    parse_service_principal_call,
)
from .resolver import Endpoints, resolve_endpoints
from .transport import RequestsTransport, Transport, TransportResponse

logger = logging.getLogger(__name__)

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _error_description(response: TransportResponse) -> str:
    body = response.body
    if isinstance(body, Mapping) and body.get("error_description"):
        return str(body["error_description"])
    return f"Authentication failed with status code {response.status_code}."


class AzureAuthentication:
    """Acquire access tokens with a service principal or a managed identity.

    The instance resolves a default resource and authority from ``options``
    at construction time; per-call options that select no endpoint fall back
    to these values.
    """

    AZURE = Environment.AZURE
    AZURE_US_GOVERNMENT = Environment.AZURE_US_GOVERNMENT
    AZURE_GERMANY = Environment.AZURE_GERMANY
    AZURE_CHINA = Environment.AZURE_CHINA

    def __init__(
        self,
        options: OptionsLike | None = None,
        *,
        transport: Transport | None = None,
        environ: Mapping[str, str] | None = None,
        settings: AuthSettings | None = None,
    ) -> None:
        """Initialize the authenticator.

        Args:
            options: Default resource, resource type, environment and client ID.
            transport: HTTP transport. Defaults to :class:`RequestsTransport`.
            environ: Mapping read for credentials. Defaults to the process
                environment.
            settings: Library settings. Read from ``AZAUTH_*`` in ``environ``
                (or the process environment) when omitted.

        Raises:
            UnknownResourceTypeError: If ``options`` names an unknown type.
            UnknownEnvironmentError: If ``options`` names an unknown cloud.
        """
        self._settings = settings or AuthSettings.from_environ(environ)
        self.options = AuthOptions.coerce(options)

        endpoints = resolve_endpoints(self.options, self._settings.environment)
        self.resource: str = endpoints.resource
        self.authentication_url: str = endpoints.authentication_url

        self._transport: Transport = transport or RequestsTransport(
            timeout=self._settings.timeout
        )
        self._environ = environ

    def _endpoints_for(self, options: AuthOptions) -> Endpoints:
        if options.has_endpoint_selection:
            return resolve_endpoints(options, self._settings.environment)
        return Endpoints(
            resource=self.resource, authentication_url=self.authentication_url
        )

    def authenticate_with_service_principal(
        self,
        client_id: str | OptionsLike | None = None,
        client_secret: str | OptionsLike | None = None,
        tenant_id: str | OptionsLike | None = None,
        options: OptionsLike | None = None,
    ) -> Any:
        """Authenticate with the client ID and secret of a service principal.

        Credentials that are not passed are read from ``CLIENT_ID``,
        ``CLIENT_SECRET`` and ``TENANT_ID``. Options may be passed as the only
        argument.

        Args:
            client_id: Client ID of the service principal, or the options.
            client_secret: Client secret of the service principal.
            tenant_id: Tenant ID of the service principal.
            options: Resource, resource type and environment to authenticate with.

        Returns:
            The token response body as returned by the authority.

        Raises:
            InvalidArgumentsError: If the secret or tenant is not a string.
            MissingCredentialsError: If a credential is neither passed nor set.
            AuthenticationFailedError: If the authority does not answer 200.
        """
        call = parse_service_principal_call(client_id, client_secret, tenant_id, options)
        match call:
            case ExplicitCredentials():
                explicit = (call.client_id, call.client_secret, call.tenant_id)
            case OptionsOnly():
                explicit = (None, None, None)
        opts = call.options

        env = ServicePrincipalEnvironment.from_environ(self._environ)
        env_secret = env.client_secret.get_secret_value() if env.client_secret else None
        cid = explicit[0] or env.client_id
        cse = explicit[1] or env_secret
        tid = explicit[2] or env.tenant_id

        if not (cid and cse and tid):
            raise MissingCredentialsError(
                "CLIENT_ID, CLIENT_SECRET and TENANT_ID must be set or provided."
            )

        endpoints = self._endpoints_for(opts)
        body = (
            f"resource={endpoints.resource}"
            f"&client_id={_encode_component(cid)}"
            f"&client_secret={_encode_component(cse)}"
            f"&grant_type={CLIENT_CREDENTIALS_GRANT}"
        )
        uri = f"{endpoints.authentication_url}/{tid}/oauth2/token"

        logger.info(
            "Requesting token for %s with service principal %s.",
            endpoints.resource,
            cid,
        )
        response = self._transport.post(
            uri, headers={"Content-Type": FORM_CONTENT_TYPE}, data=body
        )
        if response.status_code != 200:
            raise AuthenticationFailedError(
                _error_description(response),
                status_code=response.status_code,
                body=response.body,
            )
        return response.body

    def authenticate_with_msi(self, options: OptionsLike | None = None) -> Any:
        """Authenticate with a managed identity.

        ``MSI_ENDPOINT`` and ``MSI_SECRET`` must be set. The system assigned
        identity is used unless a client ID is given in the options (per call
        or at construction) or through ``MSI_CLIENT_ID``, which selects a user
        assigned identity.

        Args:
            options: Resource, resource type, environment and client ID.

        Returns:
            The token response body as returned by the endpoint.

        Raises:
            MissingMSIConfigError: If the endpoint or secret is not set.
            MSIAuthenticationFailedError: If the endpoint does not answer 200.
        """
        opts = AuthOptions.coerce(options)

        env = ManagedIdentityEnvironment.from_environ(self._environ)
        if not (env.endpoint and env.secret):
            raise MissingMSIConfigError("MSI_ENDPOINT and MSI_SECRET must be set.")

        client_id = opts.client_id or self.options.client_id or env.client_id
        client_param = f"&clientid={client_id}" if client_id else ""

        endpoints = self._endpoints_for(opts)
        uri = (
            f"{env.endpoint}?resource={endpoints.resource}"
            f"{client_param}&api-version={MSI_API_VERSION}"
        )

        if client_id:
            logger.info(
                "Requesting token for %s with user assigned identity %s.",
                endpoints.resource,
                client_id,
            )
        else:
            logger.info(
                "Requesting token for %s with system assigned identity.",
                endpoints.resource,
            )
        response = self._transport.get(
            uri, headers={"Secret": env.secret.get_secret_value()}
        )
        if response.status_code != 200:
            raise MSIAuthenticationFailedError(
                "Could not authenticate with MSI.",
                status_code=response.status_code,
                body=response.body,
            )
        return response.body


def authenticate_with_service_principal(
    client_id: str | OptionsLike | None = None,
    client_secret: str | OptionsLike | None = None,
    tenant_id: str | OptionsLike | None = None,
    options: OptionsLike | None = None,
) -> Any:
    """Shortcut for :meth:`AzureAuthentication.authenticate_with_service_principal`."""
    return AzureAuthentication().authenticate_with_service_principal(
        client_id, client_secret, tenant_id, options
    )


def authenticate_with_msi(options: OptionsLike | None = None) -> Any:
    """Shortcut for :meth:`AzureAuthentication.authenticate_with_msi`."""
    return AzureAuthentication().authenticate_with_msi(options)
