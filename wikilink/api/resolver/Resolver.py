"""Resolver base class."""

from abc import ABC, abstractmethod

from .WikilinkNode import WikilinkNode


class Resolver(ABC):
    """Resolves pages referenced by wikilinks to their destinations."""

    @abstractmethod
    def resolve_wikilink(self, node: WikilinkNode) -> bytes | None:
        """Return the address of the page that the wikilink points to.

        The destination is not URL-escaped; callers escape it before
        placing it into a link.

        Args:
            node: Wikilink to resolve

        Returns:
            Destination bytes, or None to render the link contents as plain text

        Raises:
            ResolutionError: If resolution fails and rendering must halt
        """
        pass
