"""Wikilink resolver API module."""

from ._RESOLVERS import DEFAULT_RESOLVER, PRETTY_RESOLVER, RELATIVE_RESOLVER, RESOLVER_TYPES
from .get_resolver import get_resolver
from .ResolutionError import ResolutionError
from .Resolver import Resolver
from .ResolverConfig import ResolverConfig
from .rooted_resolver import rooted_resolver
from .WikilinkNode import WikilinkNode

__all__ = [
    "DEFAULT_RESOLVER",
    "PRETTY_RESOLVER",
    "RELATIVE_RESOLVER",
    "RESOLVER_TYPES",
    "ResolutionError",
    "Resolver",
    "ResolverConfig",
    "WikilinkNode",
    "get_resolver",
    "rooted_resolver",
]
