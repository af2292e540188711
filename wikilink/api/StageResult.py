"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Outcome of an API command following the 4-stage pattern.

    Commands return it with only ``announce`` and ``progress_callback`` set;
    running the callback fills in ``result``, ``output`` and ``success``.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
