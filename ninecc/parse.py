from ninecc.errors import ParseError
from ninecc.token import Token, TokenType, equal


class Parse:
    """One-token lookahead cursor over a tokenized expression.

    The cursor only moves forward and stops on the EOF token.
    """

    tokens: list[Token]
    cursor: int

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenType.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.cursor = 0

    def peek(self) -> Token:
        return self.tokens[self.cursor]

    def advance(self) -> Token:
        token = self.peek()
        if token.kind != TokenType.EOF:
            self.cursor += 1
        return token

    def peek_is(self, op: str) -> bool:
        return equal(self.peek(), op)

    def consume(self, op: str) -> bool:
        if self.peek_is(op):
            self.advance()
            return True
        return False

    def expect(self, op: str) -> None:
        if not self.peek_is(op):
            raise ParseError.at(self.peek(), f"expected operator '{op}'")
        self.advance()

    def expect_number(self) -> int:
        token = self.peek()
        if token.kind != TokenType.Number:
            raise ParseError.at(token, "expected integer")
        self.advance()
        return token.value

    def at_eof(self) -> bool:
        return self.peek().kind == TokenType.EOF
