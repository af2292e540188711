"""Resolver configuration."""

from __future__ import annotations

__all__ = ["ResolverConfig"]

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .get_resolver import get_resolver
from .Resolver import Resolver


class ResolverConfig(BaseModel):
    """Resolver configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["default", "pretty", "relative", "rooted"] = Field(..., description="Resolver type")
    data: dict[str, Any] = Field(default_factory=dict, description="Resolver options")

    @model_validator(mode="after")
    def _check_data(self) -> ResolverConfig:
        if self.type == "rooted":
            base = self.data.get("base")
            if not isinstance(base, str) or not base:
                raise ValueError("rooted resolver requires a non-empty string 'base' in data")
            extra = set(self.data) - {"base"}
        else:
            extra = set(self.data)
        if extra:
            raise ValueError(f"Unsupported options for {self.type} resolver: {', '.join(sorted(extra))}")
        return self

    def build(self) -> Resolver:
        """Create the configured resolver."""
        return get_resolver(self.type, self.data)

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> ResolverConfig:
        """Load resolver config from config dict."""
        resolver_config = config.get("resolver")
        if not resolver_config:
            raise ValueError("resolver section is required in config")
        if not isinstance(resolver_config, dict):
            raise ValueError("resolver section must be an object")
        return cls(**resolver_config)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on WIKILINK_HOME or default to ~/.wikilink."""
        home_env = os.environ.get("WIKILINK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".wikilink"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> ResolverConfig:
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, unreadable, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls.from_config_dict(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
