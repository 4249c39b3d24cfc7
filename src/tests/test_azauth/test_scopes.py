from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from azauth.scopes import resource_from_scope, scope_from_resource

abs_resources = st.builds(
    lambda scheme, host: f"{scheme}://{host}",
    scheme=st.sampled_from(["http", "https"]),
    host=st.from_regex(
        r"(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,}", fullmatch=True
    ),
)


@given(abs_resources)
def test_scope_from_resource__round_trip(resource: str) -> None:
    """A resource survives conversion to a scope and back."""
    scope = scope_from_resource(resource)
    assert scope.endswith("/.default")
    assert resource_from_scope(scope) == resource


def test_scope_from_resource__trailing_slash() -> None:
    assert (
        scope_from_resource("https://management.core.windows.net/")
        == "https://management.core.windows.net/.default"
    )


def test_resource_from_scope__without_suffix_is_verbatim() -> None:
    assert resource_from_scope("https://vault.azure.net") == "https://vault.azure.net"


@pytest.mark.parametrize(
    "bad",
    ["", "foo", "/relative", "://", "http:///only-path", "https://"],
)
def test_invalid_inputs_raise(bad: str) -> None:
    """Relative or malformed URLs must raise ValueError."""
    with pytest.raises(ValueError, match="must be an absolute URL"):
        resource_from_scope(bad)
    with pytest.raises(ValueError, match="must be an absolute URL"):
        scope_from_resource(bad)
