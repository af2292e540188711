"""Rooted pretty URL wikilink resolver."""

from ._AffixResolver import _AffixResolver
from ._PrettyResolver import PRETTY_SUFFIX


class _RootedResolver(_AffixResolver):
    """Pretty URLs under a fixed base path.

    With base "/root/":

        [[Foo]]  => "/root/Foo/"
    """

    def __init__(self, base: str):
        if not isinstance(base, str):
            raise TypeError("Resolver base must be a string")
        super().__init__(prefix=base.encode("utf-8"), suffix=PRETTY_SUFFIX)

    @property
    def base(self) -> str:
        """Base path prefixed to every non-empty target."""
        return self.prefix.decode("utf-8")

    def __repr__(self):
        return f"_RootedResolver(base={self.base!r})"
