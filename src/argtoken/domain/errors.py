"""Domain exceptions for argument tokens."""

from typing import Any

__all__ = [
    "ArgumentTokenError",
    "InvalidTokenKind",
    "InvalidTokenError",
    "EmptyNameError",
]


class ArgumentTokenError(Exception):
    """Base class for all argtoken errors."""


class InvalidTokenKind(ArgumentTokenError):
    """Raised when a token carries a type outside of TokenType."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"Unknown token kind: {kind!r}")


class InvalidTokenError(ArgumentTokenError, ValueError):
    """Raised when a directly constructed token breaks the token invariants."""


class EmptyNameError(ArgumentTokenError, ValueError):
    """Raised when a name is empty after trimming quotes and dashes."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot derive an abbreviation from empty name {name!r}")
