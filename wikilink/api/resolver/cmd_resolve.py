"""Resolve API command.

CLI: wikilink resolve <target> [--fragment F] [--type T] [--base B] [--escape]
"""

from collections.abc import Iterator
from urllib.parse import quote

from pydantic import ValidationError

from ...utils.get_logger import get_logger
from ..StageResult import StageResult
from .ResolutionError import ResolutionError
from .ResolveOutput import ResolveOutput
from .ResolverConfig import ResolverConfig
from .WikilinkNode import WikilinkNode

logger = get_logger("cmd_resolve")

# Characters kept verbatim when escaping a destination for a link attribute
_SAFE_CHARS = "/#"


def cmd_resolve(
    target: str,
    fragment: str = "",
    resolver_type: str | None = None,
    base: str | None = None,
    escape: bool = False,
) -> StageResult:
    """Resolve a wikilink target and fragment to a destination.

    Args:
        target: Page path from [[target#fragment]]
        fragment: In-page anchor without '#'
        resolver_type: Resolver type; loaded from the config file when None
        base: Base path for the "rooted" resolver
        escape: URL-escape the destination as a renderer would
    """

    def _fail(result_obj: StageResult, message: str, resolver: str | None) -> None:
        logger.error(message)
        result_obj.output = ResolveOutput(
            errors=[message],
            warnings=[],
            resolver=resolver,
            target=target,
            fragment=fragment,
            destination=None,
            plain_text=True,
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Resolve failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        warnings: list[str] = []

        yield (0.1, "Loading resolver configuration...")
        try:
            if resolver_type is None:
                config = ResolverConfig.load()
                if base is not None:
                    warnings.append("--base ignored: resolver is taken from the config file")
            else:
                data = {"base": base} if base is not None else {}
                config = ResolverConfig(type=resolver_type, data=data)
        except (ValidationError, ValueError) as e:
            _fail(result_obj, f"Invalid resolver configuration: {e}", resolver_type)
            return

        yield (0.4, "Building wikilink node...")
        try:
            node = WikilinkNode.from_text(target, fragment)
        except ValueError as e:
            _fail(result_obj, str(e), config.type)
            return

        yield (0.6, f"Resolving with {config.type} resolver...")
        try:
            destination = config.build().resolve_wikilink(node)
        except ResolutionError as e:
            _fail(result_obj, f"Resolution failed: {e}", config.type)
            return

        text = destination.decode("utf-8") if destination is not None else None
        if text is not None and escape:
            text = quote(text, safe=_SAFE_CHARS)

        yield (1.0, "Complete")
        result_obj.output = ResolveOutput(
            errors=[],
            warnings=warnings,
            resolver=config.type,
            target=target,
            fragment=fragment,
            destination=text,
            plain_text=not text,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = f"Resolved to {text!r}" if text else "No destination, render as plain text"
        result_obj.success = True

    return StageResult(
        announce=f"Resolving wikilink {target}{'#' + fragment if fragment else ''}...",
        progress_callback=do_work,
    )
