"""Tests for ResolverConfig."""

import pytest
from pydantic import ValidationError

from tests.conftest import write_config
from wikilink.api.resolver import PRETTY_RESOLVER, ResolverConfig, WikilinkNode


def test_resolver_config_from_dict_success():
    rc = ResolverConfig.from_config_dict({"resolver": {"type": "pretty"}})
    assert rc.type == "pretty"
    assert rc.data == {}
    assert rc.build() is PRETTY_RESOLVER


def test_resolver_config_from_dict_missing_section():
    with pytest.raises(ValueError, match="resolver section is required"):
        ResolverConfig.from_config_dict({})


def test_resolver_config_rooted_builds_with_base():
    rc = ResolverConfig(type="rooted", data={"base": "/root/"})
    assert rc.build().resolve_wikilink(WikilinkNode(b"Foo")) == b"/root/Foo/"


def test_resolver_config_rooted_requires_base():
    with pytest.raises(ValidationError, match="non-empty string 'base'"):
        ResolverConfig(type="rooted")


def test_resolver_config_rejects_unknown_type():
    with pytest.raises(ValidationError):
        ResolverConfig(type="wiki")  # type: ignore[arg-type]


def test_resolver_config_rejects_unused_options():
    with pytest.raises(ValidationError, match="Unsupported options for pretty resolver: base"):
        ResolverConfig(type="pretty", data={"base": "/root/"})


def test_resolver_config_forbid_extra():
    with pytest.raises(ValidationError):
        ResolverConfig(type="default", extra="field")  # type: ignore[call-arg]


def test_resolver_config_home_dir_from_env(wikilink_home):
    assert ResolverConfig.get_home_dir() == wikilink_home.resolve()
    assert ResolverConfig.get_config_path() == wikilink_home.resolve() / "config.json"


def test_resolver_config_load(wikilink_home):
    write_config(wikilink_home, {"resolver": {"type": "rooted", "data": {"base": "/posts/"}}})
    rc = ResolverConfig.load()
    assert rc.type == "rooted"
    assert rc.data == {"base": "/posts/"}


def test_resolver_config_load_missing_file():
    with pytest.raises(ValueError, match="Configuration file not found"):
        ResolverConfig.load()


def test_resolver_config_load_invalid_json(wikilink_home):
    (wikilink_home / "config.json").write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON in config file"):
        ResolverConfig.load()


def test_resolver_config_load_validation_error(wikilink_home):
    write_config(wikilink_home, {"resolver": {"type": "wiki"}})
    with pytest.raises(ValueError, match="Configuration validation error: type"):
        ResolverConfig.load()


def test_resolver_config_load_rejects_non_object(wikilink_home):
    (wikilink_home / "config.json").write_text("[]")
    with pytest.raises(ValueError, match="must be a JSON object"):
        ResolverConfig.load()


def test_resolver_config_from_dict_rejects_non_object_section():
    with pytest.raises(ValueError, match="resolver section must be an object"):
        ResolverConfig.from_config_dict({"resolver": "pretty"})


def test_resolver_config_load_unreadable_file(wikilink_home):
    (wikilink_home / "config.json").mkdir()
    with pytest.raises(ValueError, match="Cannot read config file"):
        ResolverConfig.load()
