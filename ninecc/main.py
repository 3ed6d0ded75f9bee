from typing import Optional

import typer

from ninecc.codegen import codegen
from ninecc.errors import CompileError, UsageError
from ninecc.tokenize import tokenize

app = typer.Typer()


def compile_expression(expression: str) -> str:
    tokens = tokenize(expression)
    return codegen(tokens)


@app.command(
    context_settings={"ignore_unknown_options": True}, add_help_option=False
)
def main(expressions: Optional[list[str]] = typer.Argument(None)):
    """Compile an expression such as "5+20-4" into x86-64 assembly."""
    expressions = expressions or []
    try:
        if len(expressions) != 1:
            raise UsageError(
                f"expected exactly one expression argument, got {len(expressions)}"
            )
        result = compile_expression(expressions[0])
    except CompileError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    typer.echo(result, nl=False)


if __name__ == "__main__":
    app()
