"""Token category domain type."""

from enum import Enum

__all__ = ["TokenType"]


class TokenType(Enum):
    """Syntactic category of a single command-line token.

    Values keep the numeric category codes used by the console framework that
    consumes these tokens, so options (1xx), values (2xx) and commands (3xx)
    can still be grouped by range.
    """

    OPTION = 100
    EQUAL_SEPARATED_OPTION = 101
    VALUE = 200
    COMMAND = 300

    @property
    def is_option_kind(self) -> bool:
        """True for both plain and equal-separated options."""
        return self in (TokenType.OPTION, TokenType.EQUAL_SEPARATED_OPTION)
