"""Resolve the legacy positional call shape of the service principal flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from .config import AuthOptions
from .errors import InvalidArgumentsError

OptionsLike = Union[AuthOptions, Mapping[str, Any]]


@dataclass(frozen=True)
class OptionsOnly:
    """Options were passed in place of the credentials."""

    options: AuthOptions


@dataclass(frozen=True)
class ExplicitCredentials:
    """Credentials (possibly partial) were passed positionally."""

    client_id: str | None
    client_secret: str | None
    tenant_id: str | None
    options: AuthOptions


ServicePrincipalCall = Union[OptionsOnly, ExplicitCredentials]


def _is_options(value: Any) -> bool:
    return isinstance(value, (AuthOptions, Mapping))


def _is_credential(value: Any) -> bool:
    return value is None or isinstance(value, str)


def parse_service_principal_call(
    client_id: str | OptionsLike | None,
    client_secret: str | OptionsLike | None,
    tenant_id: str | OptionsLike | None,
    options: OptionsLike | None,
) -> ServicePrincipalCall:
    """Translate positional arguments into a :class:`ServicePrincipalCall`.

    ``authenticate_with_service_principal(options)`` is accepted as a shorthand
    for passing options only; the credentials then come from the environment.

    Args:
        client_id: Client ID, or the options when called with options only.
        client_secret: Client secret.
        tenant_id: Tenant ID.
        options: Options when credentials are passed positionally.

    Raises:
        InvalidArgumentsError: If the secret or tenant slot holds anything but
            a string or ``None``.
    """
    if not (_is_credential(client_secret) and _is_credential(tenant_id)):
        raise InvalidArgumentsError(
            "Either specify clientId, clientSecret, tenantId and options, "
            "or options only."
        )

    if _is_options(client_id):
        return OptionsOnly(options=AuthOptions.coerce(client_id))

    return ExplicitCredentials(
        client_id=client_id,
        client_secret=client_secret,
        tenant_id=tenant_id,
        options=AuthOptions.coerce(options),
    )
