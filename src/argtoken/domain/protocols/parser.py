"""Token parser and builder protocols."""

from typing import Protocol

from argtoken.domain.token import ArgumentToken

__all__ = ["TokenParser", "TokenBuilder"]


class TokenParser(Protocol):
    """Protocol for token parsers.

    This protocol defines the interface for turning one raw, already split
    command-line argument into a classified token.
    """

    def parse(self, raw: str) -> ArgumentToken:
        """Parse a raw argument.

        Args:
            raw: A single argument exactly as received (e.g., "--port=8080" or "'hello'")

        Returns:
            Fully populated ArgumentToken. Implementations must not raise.
        """
        ...


class TokenBuilder(Protocol):
    """Protocol for token builders (the inverse of TokenParser, modulo normalization)."""

    def build(self, token: ArgumentToken) -> str:
        """Render a token back into its canonical textual form.

        Args:
            token: Token to render

        Returns:
            Canonical argument string
        """
        ...
