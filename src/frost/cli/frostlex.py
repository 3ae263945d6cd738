"""
frostlex - Frost Token Dumper
=============================

Runs the Frost lexer over a source file and prints one line per token.
Useful for checking how the lexer splits tricky input before handing it
to the parser.

Usage Examples
--------------
Dump tokens:
    $ frostlex main.fr

Read from stdin:
    $ echo 'x <= 1;' | frostlex -

Keep comments and stop at the first error:
    $ frostlex --comments --strict main.fr

Output Format
-------------
    1:1     IDENTIFIER      x
    1:3     LESS_EQUAL      <=
    1:6     LITERAL_INT     1
    1:7     SEMICOLON       ;
    1:8     EOF
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from frost import __version__
from frost.cli.errors import ExitCode, handle_cli_exception
from frost.diagnostics import ErrorCollector
from frost.lexer import Lexer, LexerOptions
from frost.tokens import Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """
    Format a token as 'line:column  KIND  lexeme'.

    Control characters and backslashes in the lexeme are escaped so that a
    multi-line comment or string still prints on a single line.
    """
    position = f"{token.line}:{token.column}"
    text = token.text.encode("unicode_escape").decode("ascii")
    return f"{position:<8}{token.type.name:<16}{text}".rstrip()



# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first lexical error",
)
@click.option(
    "--comments",
    is_flag=True,
    help="Include COMMENT tokens in the output",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Stop after this many lexical errors",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="frostlex")
def main(
    input_file: Path,
    strict: bool,
    comments: bool,
    max_errors: Optional[int],
    verbose: bool,
) -> None:
    """
    Print the tokens of a Frost source file.

    INPUT_FILE is the source file to tokenize, or - for stdin.

    \b
    Examples:
        frostlex main.fr              # Dump all tokens
        frostlex --comments main.fr   # Include comments
        frostlex --strict main.fr     # Fail on the first error
    """
    setup_logging(verbose)
    diagnostics = ErrorCollector(max_errors=max_errors)

    try:
        if str(input_file) == "-":
            filename = "<stdin>"
            source = click.get_text_stream("stdin").read()
        else:
            filename = str(input_file)
            source = input_file.read_text(encoding="utf-8")

        logger.debug(f"Tokenizing {filename}")

        options = LexerOptions(
            filename=filename,
            strict=strict,
            keep_comments=comments,
        )

        count = 0
        with Lexer(source, options, diagnostics) as lexer:
            for token in lexer.tokenize():
                click.echo(format_token(token))
                count += 1

        logger.debug(f"Tokenized: {count} tokens")

    except Exception as e:
        # Errors collected before the limit was hit are still worth showing
        if diagnostics.has_errors():
            click.echo(diagnostics.report(), err=True)
        handle_cli_exception(e, verbose)

    if diagnostics.has_errors():
        click.echo(diagnostics.report(), err=True)
        sys.exit(ExitCode.LEXICAL_ERROR)


if __name__ == "__main__":
    main()
