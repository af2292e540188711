"""Wikilink resolver package."""

from .api.resolver import (
    DEFAULT_RESOLVER,
    PRETTY_RESOLVER,
    RELATIVE_RESOLVER,
    ResolutionError,
    Resolver,
    WikilinkNode,
    rooted_resolver,
)

__all__ = [
    "DEFAULT_RESOLVER",
    "PRETTY_RESOLVER",
    "RELATIVE_RESOLVER",
    "ResolutionError",
    "Resolver",
    "WikilinkNode",
    "rooted_resolver",
]
