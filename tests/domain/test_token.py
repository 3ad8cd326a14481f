"""Tests for the ArgumentToken model and TokenType."""

import pytest
from pydantic import ValidationError

from argtoken.application.parsers.token_parser import parse
from argtoken.domain.token import ArgumentToken
from argtoken.domain.types import TokenType


class TestTokenType:
    """Tests for TokenType."""

    def test_category_codes(self):
        """Test the numeric category codes."""
        assert TokenType.OPTION.value == 100
        assert TokenType.EQUAL_SEPARATED_OPTION.value == 101
        assert TokenType.VALUE.value == 200
        assert TokenType.COMMAND.value == 300

    def test_is_option_kind(self):
        """Test which categories count as options."""
        assert TokenType.OPTION.is_option_kind
        assert TokenType.EQUAL_SEPARATED_OPTION.is_option_kind
        assert not TokenType.VALUE.is_option_kind
        assert not TokenType.COMMAND.is_option_kind


class TestArgumentToken:
    """Tests for ArgumentToken."""

    def test_defaults(self):
        """Test default field values."""
        token = ArgumentToken(type=TokenType.COMMAND, value="run")
        assert token.raw == ""
        assert token.name is None
        assert token.abbreviated is False
        assert token.position is None

    def test_frozen(self):
        """Test that tokens cannot be mutated."""
        token = parse("--port=8080")

        with pytest.raises(ValidationError):
            token.value = "9090"

    def test_with_position(self):
        """Test that with_position only changes position."""
        token = parse("--port=8080")
        moved = token.with_position(3)

        assert moved.position == 3
        assert token.position is None
        assert moved.model_dump(exclude={"position"}) == token.model_dump(exclude={"position"})

    def test_with_position_validates(self):
        """Test that with_position rejects a non-integer position."""
        token = parse("-v")

        with pytest.raises(ValidationError):
            token.with_position("abc")

        assert token.with_position(None).position is None

    def test_option_requires_name(self):
        """Test that option kinds must carry a name."""
        with pytest.raises(ValidationError):
            ArgumentToken(type=TokenType.OPTION)

        with pytest.raises(ValidationError):
            ArgumentToken(type=TokenType.EQUAL_SEPARATED_OPTION, value="8080")

    def test_value_and_command_reject_name(self):
        """Test that values and commands cannot carry a name."""
        with pytest.raises(ValidationError):
            ArgumentToken(type=TokenType.VALUE, name="x", value="y")

        with pytest.raises(ValidationError):
            ArgumentToken(type=TokenType.COMMAND, name="x", value="y")

    def test_value_and_command_reject_abbreviated(self):
        """Test that only options can be abbreviated."""
        with pytest.raises(ValidationError):
            ArgumentToken(type=TokenType.VALUE, value="y", abbreviated=True)

    def test_has_value(self):
        """Test has_value distinguishes absent from empty."""
        assert not parse("--verbose").has_value
        assert parse("--name=").has_value
        assert parse("''").has_value

    def test_kind_properties(self):
        """Test is_option, is_value and is_command."""
        assert parse("-v").is_option
        assert parse("--a=b").is_option
        assert parse("'x'").is_value
        assert parse("run").is_command
        assert not parse("run").is_option

    def test_str_is_built_form(self):
        """Test that str() renders the canonical form."""
        assert str(parse('"hello"')) == "'hello'"
        assert str(parse("--port=8080")) == "--port=8080"


class TestTokenFactories:
    """Tests for the token factory classmethods."""

    def test_option(self):
        """Test ArgumentToken.option."""
        token = ArgumentToken.option("port", "8080")
        assert token.type is TokenType.OPTION
        assert token.build() == "--port 8080"
        assert token.raw == ""

        assert ArgumentToken.option("v", abbreviated=True).raw == "-v"

    def test_equal_separated(self):
        """Test ArgumentToken.equal_separated."""
        token = ArgumentToken.equal_separated("port", "8080")
        assert token.type is TokenType.EQUAL_SEPARATED_OPTION
        assert token.raw == "--port=8080"

    def test_value_of(self):
        """Test ArgumentToken.value_of."""
        token = ArgumentToken.value_of("hello world")
        assert token.type is TokenType.VALUE
        assert token.raw == "'hello world'"
        assert parse(token.raw).value == "hello world"

    def test_command(self):
        """Test ArgumentToken.command."""
        token = ArgumentToken.command("deploy")
        assert token.raw == "deploy"
        assert token.is_command

    def test_synthesized_tokens_parse_back(self):
        """Test that factory tokens parse back to the same parts."""
        for token in (
            ArgumentToken.equal_separated("port", "8080"),
            ArgumentToken.option("v", abbreviated=True),
            ArgumentToken.value_of("x"),
            ArgumentToken.command("run"),
        ):
            parsed = parse(token.raw)
            assert (parsed.type, parsed.name, parsed.value, parsed.abbreviated) == (
                token.type,
                token.name,
                token.value,
                token.abbreviated,
            )

    def test_option_with_value_parses_back_as_two_arguments(self):
        """Test that an option with a value rebuilds into two parseable arguments."""
        token = ArgumentToken.option("p", "8080", abbreviated=True)
        name_part, value_part = token.build().split(" ")

        option = parse(name_part)
        assert (option.type, option.name, option.abbreviated) == (TokenType.OPTION, "p", True)
        assert parse(value_part).value == "8080"
