"""Default wikilink resolver."""

from ._AffixResolver import _AffixResolver

HTML_SUFFIX = b".html"


class _SuffixResolver(_AffixResolver):
    """Resolves wikilinks relative to the source page.

    Appends ".html" to targets without an extension:

        [[Foo]]      => "Foo.html"
        [[Foo bar]]  => "Foo bar.html"
        [[foo/Bar]]  => "foo/Bar.html"
        [[foo.pdf]]  => "foo.pdf"
    """

    def __init__(self):
        super().__init__(prefix=b"", suffix=HTML_SUFFIX)
