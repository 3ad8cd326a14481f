"""Classification, parsing and building of command-line argument tokens."""

from argtoken.application.parsers.abbreviations import (
    split_abbreviation_cluster,
    to_abbreviation,
    to_option,
)
from argtoken.application.parsers.builder import ArgumentTokenBuilder, build, build_all
from argtoken.application.parsers.classifier import (
    classify,
    is_abbreviation,
    is_abbreviation_cluster,
    is_command,
    is_option,
    is_value,
)
from argtoken.application.parsers.sequence import expand_abbreviation_clusters, parse_arguments
from argtoken.application.parsers.token_parser import ArgumentTokenParser, parse

__all__ = [
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
