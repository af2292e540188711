"""Resolver that wraps targets in a fixed prefix and suffix."""

from dataclasses import dataclass

from ...utils.get_logger import get_logger
from ._assemble_destination import _assemble_destination
from .Resolver import Resolver
from .WikilinkNode import WikilinkNode

logger = get_logger("resolver")


@dataclass(frozen=True)
class _AffixResolver(Resolver):
    """Base for the built-in resolvers.

    Each built-in policy is this resolver with its own (prefix, suffix) pair.
    """

    prefix: bytes = b""
    suffix: bytes = b""

    def resolve_wikilink(self, node: WikilinkNode) -> bytes:
        destination = _assemble_destination(node, prefix=self.prefix, suffix=self.suffix)
        logger.debug(f"{type(self).__name__} resolved {node.target!r} (fragment {node.fragment!r}) -> {destination!r}")
        return destination
