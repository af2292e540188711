"""Rooted resolver factory (UNO: single function)."""

from ._RootedResolver import _RootedResolver
from .Resolver import Resolver


def rooted_resolver(base: str) -> Resolver:
    """Create a resolver that prefixes targets with base.

    Args:
        base: Base path, e.g. "/root/"

    Returns:
        Configured resolver
    """
    return _RootedResolver(base)
