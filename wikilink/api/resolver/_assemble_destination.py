"""Destination assembly shared by all affix resolvers (UNO: single function)."""

from ._has_extension import _has_extension
from .WikilinkNode import WikilinkNode

FRAGMENT_SEPARATOR = b"#"


def _assemble_destination(node: WikilinkNode, prefix: bytes, suffix: bytes) -> bytes:
    """Build prefix + target + suffix + '#' + fragment.

    Prefix and suffix only apply when the target is non-empty, and the suffix
    only when the target has no extension. The fragment always comes last.
    """
    parts: list[bytes] = []
    if node.target:
        parts.append(prefix)
        parts.append(node.target)
        if not _has_extension(node.target):
            parts.append(suffix)
    if node.fragment:
        parts.append(FRAGMENT_SEPARATOR)
        parts.append(node.fragment)
    return b"".join(parts)
