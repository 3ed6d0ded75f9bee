from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TokenType(IntEnum):
    Punctuator = 1
    Number = 2
    EOF = 3


@dataclass
class Token:
    kind: TokenType
    value: Optional[int] = None
    location: int = 0
    length: int = 0
    expression: str = ""
    original_expression: str = ""


def new_token(
    token_type: TokenType, start: int, end: int, original_expression: str
) -> Token:
    return Token(
        token_type,
        None,
        start,
        end - start,
        original_expression[start:end],
        original_expression,
    )


def equal(token: Token, op: str) -> bool:
    return token.kind == TokenType.Punctuator and token.expression == op
