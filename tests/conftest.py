import pytest


def run_assembly(asm: str) -> int:
    """Execute the mov/add/sub lines of an emitted ``main`` and return rax."""
    rax = None
    for line in asm.splitlines():
        if not line.startswith("\t"):
            continue
        parts = line.strip().replace(",", "").split()
        match parts:
            case ["mov", "rax", value]:
                rax = int(value)
            case ["add", "rax", value]:
                rax += int(value)
            case ["sub", "rax", value]:
                rax -= int(value)
            case ["ret"]:
                return rax
            case _:
                raise AssertionError(f"unexpected instruction {line!r}")
    raise AssertionError("program does not return")


def evaluate_expression(expression: str) -> int:
    """Left-to-right reference evaluation of a well-formed +/- expression."""
    compact = expression.replace(" ", "")
    total = 0
    sign = 1
    number = ""
    for char in compact + "+":
        if char.isdigit():
            number += char
            continue
        total += sign * int(number)
        number = ""
        sign = 1 if char == "+" else -1
    return total


@pytest.fixture
def run():
    return run_assembly


@pytest.fixture
def evaluate():
    return evaluate_expression
