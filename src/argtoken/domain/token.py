"""ArgumentToken domain model.

A token is one classified unit of command-line input. Tokens are frozen
Pydantic models: every field is computed at construction time, and the only
supported change afterwards is a copy with a different ``position``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from argtoken.domain.errors import InvalidTokenError
from argtoken.domain.types import TokenType

__all__ = ["ArgumentToken"]


class ArgumentToken(BaseModel):
    """One classified command-line token.

    ``value`` is ``None`` when absent, which keeps it distinct from an empty
    string and from falsy-looking strings such as ``"0"``.
    """

    raw: str = Field("", description="Original, unmodified input token")
    type: TokenType = Field(..., description="Syntactic category of the token")
    name: Optional[str] = Field(None, description="Option name, only for option kinds")
    value: Optional[str] = Field(None, description="Literal value or payload")
    abbreviated: bool = Field(default=False, description="Name was introduced with a single dash")
    position: Optional[int] = Field(None, description="Caller-assigned ordering index")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_shape(self) -> "ArgumentToken":
        if self.type.is_option_kind:
            if self.name is None:
                raise InvalidTokenError(f"{self.type.name} token requires a name")
        else:
            if self.name is not None:
                raise InvalidTokenError(f"{self.type.name} token cannot carry a name")
            if self.abbreviated:
                raise InvalidTokenError(f"{self.type.name} token cannot be abbreviated")
        return self

    @property
    def is_option(self) -> bool:
        return self.type.is_option_kind

    @property
    def is_value(self) -> bool:
        return self.type is TokenType.VALUE

    @property
    def is_command(self) -> bool:
        return self.type is TokenType.COMMAND

    @property
    def has_value(self) -> bool:
        """True when a value is present, even if it is an empty string."""
        return self.value is not None

    def with_position(self, position: Optional[int]) -> "ArgumentToken":
        """Return a validated copy of this token with ``position`` replaced."""
        return self.model_validate({**self.model_dump(), "position": position})

    def build(self) -> str:
        """Return the canonical textual form of this token."""
        from argtoken.application.parsers.builder import build

        return build(self)

    def __str__(self) -> str:
        return self.build()

    @classmethod
    def option(cls, name: str, value: Optional[str] = None, abbreviated: bool = False) -> "ArgumentToken":
        """Create an option token (``--name value`` or ``-n value``).

        With a value the built text spans two arguments, so ``raw`` stays empty.
        """
        if value:
            return cls(type=TokenType.OPTION, name=name, value=value, abbreviated=abbreviated)
        return cls._synthesize(type=TokenType.OPTION, name=name, value=value, abbreviated=abbreviated)

    @classmethod
    def equal_separated(cls, name: str, value: Optional[str], abbreviated: bool = False) -> "ArgumentToken":
        """Create an equal-separated option token (``--name=value``)."""
        return cls._synthesize(
            type=TokenType.EQUAL_SEPARATED_OPTION, name=name, value=value, abbreviated=abbreviated
        )

    @classmethod
    def value_of(cls, value: str) -> "ArgumentToken":
        """Create a quoted literal value token."""
        return cls._synthesize(type=TokenType.VALUE, value=value)

    @classmethod
    def command(cls, word: str) -> "ArgumentToken":
        """Create a bare command word token."""
        return cls._synthesize(type=TokenType.COMMAND, value=word)

    @classmethod
    def _synthesize(cls, **fields) -> "ArgumentToken":
        token = cls(**fields)
        return token.model_copy(update={"raw": token.build()})
