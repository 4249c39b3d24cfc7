from typing import Final
from urllib.parse import urlparse

DEFAULT_SCOPE_SUFFIX: Final[str] = "/.default"


def _ensure_absolute(url: str, name: str) -> None:
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"{name} must be an absolute URL")


def resource_from_scope(scope: str) -> str:
    """Return the v1 resource audience for a v2 scope.

    Args:
        scope: Absolute scope (e.g., "https://vault.azure.net/.default").

    Returns:
        The scope without its "/.default" suffix.

    Raises:
        ValueError: If ``scope`` is not absolute or lacks a host.
    """
    _ensure_absolute(scope, "scope")
    if scope.endswith(DEFAULT_SCOPE_SUFFIX):
        return scope[: -len(DEFAULT_SCOPE_SUFFIX)]
    return scope


def scope_from_resource(resource: str) -> str:
    _ensure_absolute(resource, "resource")
    return f"{resource.rstrip('/')}{DEFAULT_SCOPE_SUFFIX}"
