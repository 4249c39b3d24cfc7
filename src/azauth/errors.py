"""Errors raised while resolving endpoints and acquiring tokens."""

from __future__ import annotations

from typing import Any, Optional


class AzureAuthenticationError(Exception):
    """Base error for azauth."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownResourceTypeError(AzureAuthenticationError, ValueError):
    """Raised when a resource type is not predefined for the selected cloud."""

    def __init__(self, resource_type: str) -> None:
        super().__init__("No such resource is predefined.")
        self.resource_type = resource_type


class UnknownEnvironmentError(AzureAuthenticationError, ValueError):
    """Raised when an environment does not name a known cloud."""

    def __init__(self, environment: str) -> None:
        super().__init__(f"No such environment is predefined: {environment}.")
        self.environment = environment


class InvalidArgumentsError(AzureAuthenticationError, TypeError):
    """Raised when credentials and options are mixed in an unsupported order."""


class MissingCredentialsError(AzureAuthenticationError):
    """Raised when service principal credentials are neither passed nor set."""


class MissingMSIConfigError(AzureAuthenticationError):
    """Raised when the managed identity endpoint or secret is not set."""


class AuthenticationFailedError(AzureAuthenticationError):
    """Raised when the identity endpoint answers with a non-200 status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(status_code={self.status_code!r}, message={self.message!r})"


class MSIAuthenticationFailedError(AuthenticationFailedError):
    """Raised when the managed identity endpoint rejects the request."""
