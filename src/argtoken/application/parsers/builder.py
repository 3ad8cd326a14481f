"""Builder rendering ArgumentTokens back into argument strings."""

from typing import Iterable

from argtoken.domain.errors import InvalidTokenKind
from argtoken.domain.token import ArgumentToken
from argtoken.domain.types import TokenType
from argtoken.logger import get_logger

logger = get_logger("parsers")


class ArgumentTokenBuilder:
    """
    Builder producing the canonical textual form of a token.

    This is a normalization rather than an exact inverse of parsing:
    - quoted values are always rendered with single quotes
    - the separator between option name and value ('=' or ' ') follows the
      token type, not the original raw text
    """

    def build(self, token: ArgumentToken) -> str:
        """
        Render a token.

        Examples:
            EQUAL_SEPARATED_OPTION(name='port', value='8080') -> '--port=8080'
            OPTION(name='v', abbreviated=True) -> '-v'
            VALUE(value='hello') -> "'hello'"

        Args:
            token: Token to render

        Returns:
            Canonical argument string

        Raises:
            InvalidTokenKind: If the token type is not a TokenType member
        """
        prefix = "-" if token.abbreviated else "--"

        if token.type is TokenType.EQUAL_SEPARATED_OPTION:
            return f"{prefix}{token.name}" + (f"={token.value}" if token.value else "")

        if token.type is TokenType.OPTION:
            return f"{prefix}{token.name}" + (f" {token.value}" if token.value else "")

        if token.type is TokenType.VALUE:
            return f"'{token.value or ''}'"

        if token.type is TokenType.COMMAND:
            return token.value or ""

        logger.warning(f"Refusing to build token with unknown kind {token.type!r}")
        raise InvalidTokenKind(token.type)

    def build_all(self, tokens: Iterable[ArgumentToken]) -> list[str]:
        """Render several tokens, keeping their order."""
        return [self.build(token) for token in tokens]


_default_builder = ArgumentTokenBuilder()


def build(token: ArgumentToken) -> str:
    """Render a token with the shared default builder."""
    return _default_builder.build(token)


def build_all(tokens: Iterable[ArgumentToken]) -> list[str]:
    """Render several tokens with the shared default builder."""
    return _default_builder.build_all(tokens)
