from ninecc.token import Token


class CompileError(Exception):
    """Base class for every error the compiler reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(CompileError):
    """The command line did not carry exactly one expression."""


class SourceError(CompileError):
    """An error pointing at a position in the input expression.

    ``str()`` renders the expression followed by a caret line under the
    offending character.
    """

    def __init__(self, message: str, expression: str, location: int) -> None:
        super().__init__(message)
        self.expression = expression
        self.location = location

    @classmethod
    def at(cls, token: Token, message: str) -> "SourceError":
        return cls(message, token.original_expression, token.location)

    def __str__(self) -> str:
        caret = " " * self.location + "^"
        return f"{self.expression}\n{caret} {self.message}"


class LexError(SourceError):
    pass


class ParseError(SourceError):
    pass

