"""Wikilink resolution error."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .WikilinkNode import WikilinkNode


class ResolutionError(Exception):
    """Raised when a wikilink cannot be resolved and rendering must halt."""

    def __init__(self, message: str, node: WikilinkNode | None = None):
        self.node = node
        super().__init__(message)
