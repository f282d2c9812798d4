#!/usr/bin/env python3
"""CLI interface for notable-html."""

import logging
import sys
import time
from pathlib import Path
from typing import Optional

import click

from .errors import NotableHtmlError
from .formatter import NotableHtmlFormatter
from .lexing import get_lexer
from .timings import log_timing


def _read_source(source: Path) -> str:
    """Read source text from a file, or from stdin when the path is ``-``."""
    if str(source) == "-":
        return sys.stdin.read()
    return source.read_text(encoding="utf-8")


@click.command()
@click.argument("source", type=click.Path(path_type=Path, allow_dash=True))
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Write the HTML fragment to this file (default: stdout)",
)
@click.option(
    "-l",
    "--lexer",
    "lexer_name",
    type=str,
    default=None,
    help="Pygments lexer name (default: guessed from the file name, plain text otherwise)",
)
@click.option(
    "-n",
    "--line-numbers",
    is_flag=True,
    help="Render a line-number gutter next to the code",
)
@click.option(
    "--layout",
    type=click.Choice(["table", "div"]),
    default="table",
    help="Gutter layout when --line-numbers is set (default: table)",
)
@click.option(
    "--start-line",
    type=int,
    default=1,
    help="First line number shown in the gutter (default: 1)",
)
@click.option(
    "--inline-theme",
    type=str,
    default=None,
    help='Inline styles from this Pygments style (e.g. "monokai") instead of CSS classes',
)
@click.option(
    "--css-class",
    type=str,
    default="highlight",
    help='Class of the outer wrapper element (default: "highlight"; "" for none)',
)
@click.option(
    "--no-wrap",
    is_flag=True,
    help="Do not wrap the output in an outer container element",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug logging and show full traceback on errors.",
)
def main(
    source: Path,
    output: Optional[Path],
    lexer_name: Optional[str],
    line_numbers: bool,
    layout: str,
    start_line: int,
    inline_theme: Optional[str],
    css_class: str,
    no_wrap: bool,
    debug: bool,
) -> None:
    """Render SOURCE as a syntax-highlighted HTML fragment.

    SOURCE: Path to a source file, or - to read from stdin.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    t_start = time.time()

    try:
        formatter = NotableHtmlFormatter(
            wrapper_class=css_class,
            layout_style=layout,
            line_numbers=line_numbers,
            start_line=start_line,
            inline_theme=inline_theme,
            wrap=not no_wrap,
        )
        file_name = None if str(source) == "-" else source.name
        lexer = get_lexer(lexer_name, file_name)

        with log_timing("Read source", t_start):
            code = _read_source(source)

        with log_timing("Render", t_start):
            tokens = lexer.get_tokens(code)
            if output is not None:
                # Render in full first so a failure leaves the file untouched
                fragment = formatter.render(tokens)
                output.write_text(fragment, encoding="utf-8")
            else:
                for chunk in formatter.stream(tokens):
                    click.echo(chunk, nl=False)

        if output is not None:
            click.echo(f"Wrote {output}", err=True)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    except NotableHtmlError as e:
        click.echo(f"Error: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error rendering {source}: {e}", err=True)
        if debug:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
