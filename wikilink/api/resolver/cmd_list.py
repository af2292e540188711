"""Resolver list API command.

CLI: wikilink list
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._RESOLVERS import RESOLVER_TYPES
from .ListOutput import ListOutput, ResolverTypeInfo


def cmd_list() -> StageResult:
    """List available resolver types."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Collecting resolver types...")
        resolvers = [
            ResolverTypeInfo(type=name, description=description, requires_base=name == "rooted")
            for name, description in RESOLVER_TYPES.items()
        ]
        yield (1.0, "Complete")
        result_obj.output = ListOutput(
            errors=[],
            warnings=[],
            resolvers=resolvers,
            count=len(resolvers),
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(resolvers)} resolver types"
        result_obj.success = True

    return StageResult(
        announce="Listing resolver types...",
        progress_callback=do_work,
    )
