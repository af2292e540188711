"""Pretty URL wikilink resolver."""

from ._AffixResolver import _AffixResolver

PRETTY_SUFFIX = b"/"


class _PrettyResolver(_AffixResolver):
    """Resolves wikilinks to directory-style URLs: [[Foo]] => "Foo/"."""

    def __init__(self):
        super().__init__(prefix=b"", suffix=PRETTY_SUFFIX)
