"""Helpers for parsing an already split argument list."""

from typing import Iterable, Optional

from argtoken.application.parsers.abbreviations import split_abbreviation_cluster
from argtoken.application.parsers.classifier import is_abbreviation_cluster
from argtoken.application.parsers.token_parser import ArgumentTokenParser
from argtoken.domain.protocols import TokenParser
from argtoken.domain.token import ArgumentToken
from argtoken.logger import get_logger

logger = get_logger("parsers")


def expand_abbreviation_clusters(arguments: Iterable[str]) -> list[str]:
    """
    Replace every abbreviation cluster with its individual flags.

    Clusters carrying an '=' (e.g. '-o=out.txt') are left untouched since the
    characters after the dash are not all flags.

    Examples:
        ['-abc', 'run'] -> ['-a', '-b', '-c', 'run']
        ['-o=x', '--all'] -> ['-o=x', '--all']
    """
    expanded: list[str] = []
    for argument in arguments:
        if is_abbreviation_cluster(argument) and "=" not in argument:
            flags = split_abbreviation_cluster(argument, with_prefix=True)
            logger.debug(f"Expanded abbreviation cluster {argument!r} into {flags}")
            expanded.extend(flags)
        else:
            expanded.append(argument)
    return expanded


def parse_arguments(
    arguments: Iterable[str],
    expand_clusters: bool = False,
    parser: Optional[TokenParser] = None,
) -> list[ArgumentToken]:
    """
    Parse a list of arguments and number them by position.

    Args:
        arguments: Arguments already split by the shell or caller
        expand_clusters: Expand abbreviation clusters before parsing
        parser: Parser to use (defaults to ArgumentTokenParser)

    Returns:
        Tokens in input order, with position set to their index
    """
    parser = parser or ArgumentTokenParser()
    if expand_clusters:
        arguments = expand_abbreviation_clusters(arguments)

    tokens = [parser.parse(argument).with_position(index) for index, argument in enumerate(arguments)]
    logger.debug(f"Parsed {len(tokens)} argument(s)")
    return tokens
