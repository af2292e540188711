"""Tests for the Resolver contract."""

import pytest

from wikilink.api.resolver import ResolutionError, Resolver, WikilinkNode


class _PlainTextResolver(Resolver):
    def resolve_wikilink(self, node):
        return None


class _StrictResolver(Resolver):
    def __init__(self, known: set[bytes]):
        self.known = known

    def resolve_wikilink(self, node):
        if node.target not in self.known:
            raise ResolutionError(f"Unknown page: {node.target.decode()}", node=node)
        return node.target


def test_resolver_is_abstract():
    with pytest.raises(TypeError):
        Resolver()  # type: ignore[abstract]


def test_resolver_may_return_no_destination():
    assert _PlainTextResolver().resolve_wikilink(WikilinkNode(b"Foo")) is None


def test_resolution_error_carries_node():
    node = WikilinkNode(b"Missing")
    with pytest.raises(ResolutionError, match="Unknown page: Missing") as exc_info:
        _StrictResolver({b"Foo"}).resolve_wikilink(node)
    assert exc_info.value.node is node


def test_resolution_error_node_is_optional():
    assert ResolutionError("boom").node is None
