"""Filename extension check for wikilink targets (UNO: single function)."""

import posixpath


def _has_extension(target: bytes) -> bool:
    """Whether the last path segment of target carries a filename extension."""
    return posixpath.splitext(target)[1] != b""
