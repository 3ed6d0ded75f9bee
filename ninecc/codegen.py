import logging

from ninecc.errors import ParseError
from ninecc.parse import Parse
from ninecc.token import Token
from ninecc.utils import max_imm32

logger = logging.getLogger(__name__)

ACCUMULATOR = "rax"


def emit_preamble(global_stmt: list[str]) -> None:
    global_stmt.append(".intel_syntax noprefix")
    global_stmt.append(".globl main")
    global_stmt.append("main:")


def immediate(parser: Parse) -> int:
    token = parser.peek()
    value = parser.expect_number()
    if value > max_imm32:
        raise ParseError.at(token, "immediate out of range")
    return value


def codegen(tokens: list[Token]) -> str:
    """Parse ``NUMBER (('+' | '-') NUMBER)* EOF`` and emit it as assembly.

    Instructions are emitted while the tokens are consumed; no tree is built.
    Any error propagates before the text is returned.
    """
    parser = Parse(tokens)
    global_stmt = []
    emit_preamble(global_stmt)

    global_stmt.append(f"\tmov {ACCUMULATOR}, {parser.expect_number()}")
    while not parser.at_eof():
        if parser.consume("+"):
            global_stmt.append(f"\tadd {ACCUMULATOR}, {immediate(parser)}")
            continue
        parser.expect("-")
        global_stmt.append(f"\tsub {ACCUMULATOR}, {immediate(parser)}")

    global_stmt.append("\tret")
    logger.debug("emitted %d lines", len(global_stmt))
    return "\n".join(global_stmt) + "\n"
