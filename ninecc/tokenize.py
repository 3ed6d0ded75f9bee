import logging
import string

from ninecc.errors import LexError
from ninecc.token import TokenType, Token, new_token
from ninecc.utils import maxsize

logger = logging.getLogger(__name__)

PUNCTUATORS = ("+", "-")


def read_number(expression: str, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and expression[end] in string.digits:
        end += 1
    current = new_token(TokenType.Number, index, end, expression)
    # int() refuses very long digit strings, so bound the length first
    if len(current.expression.lstrip("0")) > len(str(maxsize)):
        raise LexError("number too large", expression, index)
    current.value = int(current.expression)
    if current.value > maxsize:
        raise LexError("number too large", expression, index)
    return current, end


def tokenize(expression: str) -> list[Token]:
    index = 0
    tokens = []
    while index < len(expression):
        if expression[index] in string.whitespace:
            index += 1
            continue
        if expression[index] in PUNCTUATORS:
            tokens.append(
                new_token(TokenType.Punctuator, index, index + 1, expression)
            )
            index += 1
            continue
        if expression[index] in string.digits:
            token, index = read_number(expression, index)
            tokens.append(token)
            continue
        raise LexError("invalid token", expression, index)
    tokens.append(new_token(TokenType.EOF, index, index, expression))
    logger.debug("tokenized %d characters into %d tokens", index, len(tokens))
    return tokens
