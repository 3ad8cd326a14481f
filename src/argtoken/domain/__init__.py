"""Domain layer - token types, the token value object, protocols and errors.

This layer contains:
- types: Shared domain types (TokenType)
- token: The ArgumentToken value object
- protocols: Interfaces for parsers and builders
- errors: Domain-specific exceptions

The domain layer has no import-time dependencies on the application or CLI
layers; ArgumentToken only reaches the builder lazily to render itself.
"""

from argtoken.domain.errors import (
    ArgumentTokenError,
    EmptyNameError,
    InvalidTokenError,
    InvalidTokenKind,
)
from argtoken.domain.token import ArgumentToken
from argtoken.domain.types import TokenType

__all__ = [
    "ArgumentToken",
    "TokenType",
    "ArgumentTokenError",
    "EmptyNameError",
    "InvalidTokenError",
    "InvalidTokenKind",
]
