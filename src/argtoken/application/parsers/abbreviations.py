"""Conversions between names and their option/abbreviation forms."""

from argtoken.domain.errors import EmptyNameError
from argtoken.logger import get_logger

logger = get_logger("parsers")

# Quotes and dashes are stripped together with any whitespace around them
NAME_STRIP_CHARS = "\"'- \t\r\n"


def _trim_name(name: str) -> str:
    return name.strip(NAME_STRIP_CHARS)


def split_abbreviation_cluster(argument: str, with_prefix: bool = False) -> list[str]:
    """
    Split a cluster of abbreviated flags into single flags.

    Examples:
        ('-abc', True) -> ['-a', '-b', '-c']
        ('-abc', False) -> ['a', 'b', 'c']

    Args:
        argument: Cluster such as '-abc'
        with_prefix: Prepend '-' to every flag

    Returns:
        Flags in their original left-to-right order
    """
    flags = list(argument.lstrip("-"))
    if with_prefix:
        flags = [f"-{flag}" for flag in flags]
    return flags


def to_option(name: str) -> str:
    """Return the long option form of a name, e.g. "'name'" -> '--name'."""
    return f"--{_trim_name(name)}"


def to_abbreviation(name: str) -> str:
    """
    Return the abbreviated option form of a name, built from its first character.

    Examples:
        'verbose' -> '-v'
        '--port' -> '-p'

    Raises:
        EmptyNameError: If nothing is left after trimming quotes and dashes
    """
    trimmed = _trim_name(name)
    if not trimmed:
        logger.warning(f"Cannot abbreviate empty name {name!r}")
        raise EmptyNameError(name)
    return f"-{trimmed[0]}"
