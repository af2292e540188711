"""Built-in resolver registry."""

from ._PrettyResolver import _PrettyResolver
from ._RelativeResolver import _RelativeResolver
from ._SuffixResolver import _SuffixResolver
from .Resolver import Resolver

DEFAULT_RESOLVER: Resolver = _SuffixResolver()
PRETTY_RESOLVER: Resolver = _PrettyResolver()
RELATIVE_RESOLVER: Resolver = _RelativeResolver()

# Resolver type name -> description
RESOLVER_TYPES: dict[str, str] = {
    "default": "Append .html to extensionless targets",
    "pretty": "Append / to extensionless targets",
    "relative": "Pretty URLs prefixed with ../",
    "rooted": "Pretty URLs prefixed with a configured base path",
}
