"""Exceptions raised by litemark configuration handling."""

from typing import Any


class MarkdownSettingsError(Exception):
    """Raised when parser settings cannot be interpreted."""

    def __init__(self, message: str, key: str | None = None, value: Any = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            key: The settings key that was rejected, if known
            value: The rejected value
        """
        super().__init__(message)
        self.key = key
        self.value = value
