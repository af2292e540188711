"""WikilinkNode model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WikilinkNode:
    """A parsed wikilink as handed over by the markup parser.

    ``target`` is the page path and ``fragment`` the in-page anchor without
    its leading ``#``. Either may be empty.
    """

    target: bytes = b""
    fragment: bytes = b""

    def __post_init__(self):
        for name in ("target", "fragment"):
            value = getattr(self, name)
            if not isinstance(value, bytes):
                raise TypeError(f"WikilinkNode {name} must be bytes")
            if b"#" in value:
                raise ValueError(f"WikilinkNode {name} must not contain '#': {value!r}")

    @classmethod
    def from_text(cls, target: str, fragment: str = "") -> "WikilinkNode":
        """Create a node from UTF-8 text."""
        return cls(target=target.encode("utf-8"), fragment=fragment.encode("utf-8"))
