"""Tests for cmd_list."""

from tests.conftest import run_cmd
from wikilink.api.resolver import RESOLVER_TYPES
from wikilink.api.resolver.cmd_list import cmd_list


def test_cmd_list():
    result = run_cmd(cmd_list)
    assert result.success is True
    assert result.output["count"] == len(RESOLVER_TYPES)
    types = {r["type"]: r for r in result.output["resolvers"]}
    assert set(types) == {"default", "pretty", "relative", "rooted"}
    assert types["rooted"]["requires_base"] is True
    assert types["default"]["requires_base"] is False
