"""Shared domain types."""

from argtoken.domain.types.token_type import TokenType

__all__ = [
    "TokenType",
]
