"""Domain protocols - interfaces for token parsers and builders.

Using protocols keeps the CLI and sequence helpers independent of the concrete
parser/builder classes and makes them easy to replace with test doubles.
"""

from argtoken.domain.protocols.parser import TokenBuilder, TokenParser

__all__ = [
    "TokenParser",
    "TokenBuilder",
]
