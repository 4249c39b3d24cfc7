"""Acquire Azure access tokens with a service principal or a managed identity.

Public API:
- AzureAuthentication (authenticator with both flows)
- authenticate_with_service_principal(), authenticate_with_msi() (shortcuts)
- AuthOptions, AuthSettings (settings)
- Environment, ResourceType (predefined clouds and resources)
- resolve_endpoints() (resource and authority resolution)
- ServicePrincipalCredential, ManagedIdentityTokenCredential (azure-core adapters)
"""

from .authentication import (
    AzureAuthentication,
    authenticate_with_msi,
    authenticate_with_service_principal,
)
from .config import AuthOptions, AuthSettings
from .constants import Environment, ResourceType
from .credential import ManagedIdentityTokenCredential, ServicePrincipalCredential
from .errors import (
    AuthenticationFailedError,
    AzureAuthenticationError,
    InvalidArgumentsError,
    MissingCredentialsError,
    MissingMSIConfigError,
    MSIAuthenticationFailedError,
    UnknownEnvironmentError,
    UnknownResourceTypeError,
)
from .resolver import Endpoints, resolve_endpoints
from .transport import RequestsTransport, Transport, TransportResponse

__all__ = [
    "AzureAuthentication",
    "authenticate_with_msi",
    "authenticate_with_service_principal",
    "AuthOptions",
    "AuthSettings",
    "Environment",
    "ResourceType",
    "Endpoints",
    "resolve_endpoints",
    "Transport",
    "TransportResponse",
    "RequestsTransport",
    "ServicePrincipalCredential",
    "ManagedIdentityTokenCredential",
    "AzureAuthenticationError",
    "UnknownResourceTypeError",
    "UnknownEnvironmentError",
    "InvalidArgumentsError",
    "MissingCredentialsError",
    "MissingMSIConfigError",
    "AuthenticationFailedError",
    "MSIAuthenticationFailedError",
]
