"""Relative pretty URL wikilink resolver."""

from ._AffixResolver import _AffixResolver
from ._PrettyResolver import PRETTY_SUFFIX

PARENT_PREFIX = b"../"


class _RelativeResolver(_AffixResolver):
    """Pretty URLs resolved from a sibling page's own directory.

    With pretty URLs /root/a.md is served at /root/a/, so a plain [[Foo]]
    on that page would point at /root/a/Foo/. Stepping up one level fixes it:

        [[Foo]]  => "../Foo/"
    """

    def __init__(self):
        super().__init__(prefix=PARENT_PREFIX, suffix=PRETTY_SUFFIX)
