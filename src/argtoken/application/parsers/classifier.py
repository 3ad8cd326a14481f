"""Classification predicates for single command-line arguments.

All predicates are pure functions of their input and never index past the end
of the string, so an empty argument is simply a command.
"""

from argtoken.domain.types import TokenType

QUOTE_CHARS = ('"', "'")


def is_option(argument: str) -> bool:
    """
    Check if the argument is an option.

    Examples:
        '-v' -> True
        '--port=8080' -> True
        'run' -> False
    """
    return argument.startswith("-")


def is_abbreviation(argument: str) -> bool:
    """Check if the argument is a single-dash (abbreviated) option."""
    return argument.startswith("-") and not argument.startswith("--")


def is_abbreviation_cluster(argument: str) -> bool:
    """
    Check if the argument is several abbreviated flags collapsed together.

    Examples:
        '-abc' -> True
        '-a' -> False
        '--abc' -> False
    """
    return is_abbreviation(argument) and len(argument) > 2


def is_value(argument: str) -> bool:
    """
    Check if the argument is a quoted literal value.

    The first and last characters must be the same quote character, so a lone
    quote is never a value.

    Examples:
        "'hello'" -> True
        '"hello"' -> True
        '"hello' -> False
        '"' -> False
    """
    if len(argument) < 2:
        return False

    return argument[0] in QUOTE_CHARS and argument[-1] == argument[0]


def is_command(argument: str) -> bool:
    """Check if the argument is a bare word (neither a value nor an option)."""
    return not is_value(argument) and not is_option(argument)


def classify(argument: str) -> TokenType:
    """
    Return the category the parser assigns to the argument.

    Args:
        argument: A single raw argument

    Returns:
        TokenType for the argument
    """
    if is_option(argument):
        if "=" in argument:
            return TokenType.EQUAL_SEPARATED_OPTION
        return TokenType.OPTION
    if is_value(argument):
        return TokenType.VALUE
    return TokenType.COMMAND
