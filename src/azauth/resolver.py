"""Resolve token audiences and authorities from :class:`AuthOptions`."""

from __future__ import annotations

from dataclasses import dataclass

from .config import AuthOptions
from .constants import ENVIRONMENTS, CloudEndpoints, Environment, ResourceType
from .errors import UnknownEnvironmentError, UnknownResourceTypeError


@dataclass(frozen=True)
class Endpoints:
    resource: str
    authentication_url: str


def cloud_for(environment: Environment | str) -> CloudEndpoints:
    """Return the endpoint table for ``environment``.

    Raises:
        UnknownEnvironmentError: If ``environment`` is not a known cloud.
    """
    try:
        return ENVIRONMENTS[Environment(environment)]
    except ValueError:
        raise UnknownEnvironmentError(str(environment)) from None


def resolve_endpoints(
    options: AuthOptions | None = None,
    default_environment: Environment | str = Environment.AZURE,
) -> Endpoints:
    """Resolve the resource audience and authority for a token request.

    Precedence: an explicit ``options.resource`` is returned verbatim, then
    ``options.resource_type`` is looked up in the selected cloud's table, and
    otherwise the table's ``default`` entry is used.

    Args:
        options: Per-call options. ``None`` selects the defaults.
        default_environment: Cloud used when ``options.environment`` is unset.

    Returns:
        The resolved :class:`Endpoints`.

    Raises:
        UnknownEnvironmentError: If the selected cloud is unknown.
        UnknownResourceTypeError: If ``options.resource_type`` is not in the table.
    """
    opts = options or AuthOptions()
    cloud = cloud_for(opts.environment or default_environment)

    if opts.resource:
        resource = opts.resource
    elif opts.resource_type:
        try:
            resource = cloud.resources[ResourceType(opts.resource_type)]
        except (ValueError, KeyError):
            raise UnknownResourceTypeError(str(opts.resource_type)) from None
    else:
        resource = cloud.resources[ResourceType.DEFAULT]

    return Endpoints(
        resource=resource,
        authentication_url=cloud.active_directory_authority,
    )
