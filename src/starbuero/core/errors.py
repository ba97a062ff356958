"""SDK-level errors.

Only input and configuration problems are raised. Remote failures (non-200
status, network errors) are logged and reported as `NO_RESULT` instead.
"""

from __future__ import annotations

from typing import Sequence


class StarbueroError(Exception):
    """Base SDK error."""


class ConfigurationError(StarbueroError):
    """The client cannot be built from the given configuration."""


class ValidationError(StarbueroError):
    """Arguments of an operation failed the schema check.

    Raised before any request is built, so no network call is made.
    """

    def __init__(self, operation: str, fields: Sequence[str]) -> None:
        self.operation = operation
        self.fields = tuple(fields)
        super().__init__(
            f"{operation}: missing or invalid arguments: {', '.join(self.fields)}. "
            "Please check that you have entered all the necessary data."
        )
