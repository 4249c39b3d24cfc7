from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import Environment


class AuthOptions(BaseModel):
    """Per-call options selecting the token audience and identity.

    ``resource`` takes precedence over ``resource_type`` (alias ``type``).
    ``resource_type`` and ``environment`` stay plain strings here so that
    unknown values are reported by the resolver with a dedicated error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    resource: str | None = None
    resource_type: str | None = Field(
        default=None, validation_alias=AliasChoices("resource_type", "type")
    )
    environment: str | None = None
    client_id: str | None = Field(
        default=None, validation_alias=AliasChoices("client_id", "clientId")
    )

    @property
    def has_endpoint_selection(self) -> bool:
        return bool(self.resource or self.resource_type or self.environment)

    @classmethod
    def coerce(cls, value: "AuthOptions | Mapping[str, Any] | None") -> "AuthOptions":
        """Return ``value`` as :class:`AuthOptions`, accepting mappings and ``None``."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))


class _EnvironmentModel(BaseModel):
    """Base for credential sets read from an environment mapping."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _empty_as_unset(cls, v: Any) -> Any:
        """Treat empty environment values as unset."""
        return v or None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None):
        """Build the model from ``environ`` (defaults to the process environment).

        Only the variable names declared as aliases are read.
        """
        source = os.environ if environ is None else environ
        names = [field.validation_alias for field in cls.model_fields.values()]
        return cls.model_validate({k: source[k] for k in names if k in source})


class ServicePrincipalEnvironment(_EnvironmentModel):
    """Service principal fallback credentials.

    Environment variables:
        - CLIENT_ID
        - CLIENT_SECRET
        - TENANT_ID
    """

    client_id: str | None = Field(default=None, validation_alias="CLIENT_ID")
    client_secret: SecretStr | None = Field(
        default=None, validation_alias="CLIENT_SECRET"
    )
    tenant_id: str | None = Field(default=None, validation_alias="TENANT_ID")


class ManagedIdentityEnvironment(_EnvironmentModel):
    """Managed identity endpoint settings.

    Environment variables:
        - MSI_ENDPOINT
        - MSI_SECRET
        - MSI_CLIENT_ID (user-assigned identity, optional)
    """

    endpoint: str | None = Field(default=None, validation_alias="MSI_ENDPOINT")
    secret: SecretStr | None = Field(default=None, validation_alias="MSI_SECRET")
    client_id: str | None = Field(default=None, validation_alias="MSI_CLIENT_ID")


class AuthSettings(BaseSettings):
    """Library settings read from ``AZAUTH_``-prefixed environment variables.

    Environment variables:
        - AZAUTH_ENVIRONMENT: cloud used when options do not name one.
        - AZAUTH_TIMEOUT: request timeout in seconds for the default transport.
    """

    model_config = SettingsConfigDict(
        env_prefix="AZAUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.AZURE
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "AuthSettings":
        """Build settings from ``environ`` instead of the process environment.

        With ``None`` the process environment is read as usual. Every field is
        passed explicitly so process variables cannot fill the gaps.
        """
        if environ is None:
            return cls()
        prefix = cls.model_config.get("env_prefix", "").upper()
        values: dict[str, Any] = {
            name: field.default for name, field in cls.model_fields.items()
        }
        for key, value in environ.items():
            name = key.upper()
            if name.startswith(prefix) and name[len(prefix) :].lower() in values:
                values[name[len(prefix) :].lower()] = value
        return cls(**values)
