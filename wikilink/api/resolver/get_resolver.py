"""Get resolver helper (UNO: single function)."""

from typing import Any

from ._RESOLVERS import DEFAULT_RESOLVER, PRETTY_RESOLVER, RELATIVE_RESOLVER
from .Resolver import Resolver
from .rooted_resolver import rooted_resolver


def get_resolver(resolver_type: str, data: dict[str, Any] | None = None) -> Resolver:
    """Get resolver instance by type.

    Args:
        resolver_type: Resolver type string (e.g., "pretty")
        data: Resolver options; "rooted" requires "base"

    Returns:
        Shared instance for parameterless types, new instance for "rooted"

    Raises:
        ValueError: If resolver type is unknown or options are invalid
    """
    data = data or {}
    if resolver_type == "default":
        return DEFAULT_RESOLVER
    elif resolver_type == "pretty":
        return PRETTY_RESOLVER
    elif resolver_type == "relative":
        return RELATIVE_RESOLVER
    elif resolver_type == "rooted":
        base = data.get("base")
        if not isinstance(base, str) or not base:
            raise ValueError("Resolver type 'rooted' requires a non-empty string 'base'")
        return rooted_resolver(base)
    else:
        raise ValueError(f"Unknown resolver type: {resolver_type}")
