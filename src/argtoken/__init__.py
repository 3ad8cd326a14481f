"""Classify, parse and rebuild single command-line argument tokens."""

from loguru import logger as _loguru_logger

from argtoken.application.parsers import (
    ArgumentTokenBuilder,
    ArgumentTokenParser,
    build,
    build_all,
    classify,
    expand_abbreviation_clusters,
    is_abbreviation,
    is_abbreviation_cluster,
    is_command,
    is_option,
    is_value,
    parse,
    parse_arguments,
    split_abbreviation_cluster,
    to_abbreviation,
    to_option,
)
from argtoken.domain import (
    ArgumentToken,
    ArgumentTokenError,
    EmptyNameError,
    InvalidTokenError,
    InvalidTokenKind,
    TokenType,
)

# Silent as a library until setup_logger() is called
_loguru_logger.disable("argtoken")

__version__ = "0.1.0"

__all__ = [
    "ArgumentToken",
    "TokenType",
    "ArgumentTokenError",
    "EmptyNameError",
    "InvalidTokenError",
    "InvalidTokenKind",
    "ArgumentTokenParser",
    "ArgumentTokenBuilder",
    "parse",
    "build",
    "build_all",
    "classify",
    "is_option",
    "is_abbreviation",
    "is_abbreviation_cluster",
    "is_value",
    "is_command",
    "split_abbreviation_cluster",
    "to_option",
    "to_abbreviation",
    "expand_abbreviation_clusters",
    "parse_arguments",
]
