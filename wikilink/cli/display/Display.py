"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for display implementations."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message."""
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Display structured output.

        Args:
            data: JSON-serializable data
            kwargs: Implementation-specific options (format="json"|"yaml", indent)
        """
        pass
