"""Parser turning a single raw argument into an ArgumentToken."""

from argtoken.application.parsers.classifier import (
    QUOTE_CHARS,
    is_abbreviation,
    is_option,
    is_value,
)
from argtoken.domain.token import ArgumentToken
from argtoken.domain.types import TokenType
from argtoken.logger import get_logger

logger = get_logger("parsers")


class ArgumentTokenParser:
    """Parser for single, already split command-line arguments."""

    def parse(self, raw: str) -> ArgumentToken:
        """
        Parse one argument into a token.

        The first matching branch wins: options, then quoted values, then
        commands as the catch-all. Parsing never fails; degenerate input such
        as '--' yields an option with an empty name.

        Examples:
            '--port=8080' -> EQUAL_SEPARATED_OPTION(name='port', value='8080')
            '-v' -> OPTION(name='v', abbreviated=True)
            "'hello'" -> VALUE(value='hello')
            'deploy' -> COMMAND(value='deploy')

        Args:
            raw: The argument exactly as received

        Returns:
            ArgumentToken with position left unset
        """
        if is_option(raw):
            token = self._parse_option(raw)
        elif is_value(raw):
            token = ArgumentToken(raw=raw, type=TokenType.VALUE, value=raw[1:-1])
        else:
            token = ArgumentToken(raw=raw, type=TokenType.COMMAND, value=raw)

        logger.debug(f"Parsed {raw!r} as {token.type.name} (name={token.name!r}, value={token.value!r})")
        return token

    def _parse_option(self, raw: str) -> ArgumentToken:
        """
        Parse an argument already known to start with a dash.

        Only the first '=' separates name from value; the value keeps any
        further '=' characters.
        """
        abbreviated = is_abbreviation(raw)
        name_part, separator, value_part = raw.partition("=")

        if separator:
            return ArgumentToken(
                raw=raw,
                type=TokenType.EQUAL_SEPARATED_OPTION,
                name=name_part.lstrip("-"),
                value=value_part.strip("".join(QUOTE_CHARS)),
                abbreviated=abbreviated,
            )

        return ArgumentToken(
            raw=raw,
            type=TokenType.OPTION,
            name=raw.lstrip("-"),
            abbreviated=abbreviated,
        )


_default_parser = ArgumentTokenParser()


def parse(raw: str) -> ArgumentToken:
    """Parse a single raw argument with the shared default parser."""
    return _default_parser.parse(raw)
