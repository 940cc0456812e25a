"""CLI entry point for koch-ascii."""

import asyncio
import logging
import sys

import click

from koch_ascii import render_koch
from koch_ascii.config import MAX_DEPTH, MIN_DEPTH
from koch_ascii.errors import KochError
from koch_ascii.renderers.canvas import Canvas
from koch_ascii.renderers.charset import CharSet
from koch_ascii.terminal import run_animation, run_interactive, terminal_canvas_size


@click.command()
@click.option(
    "--depth",
    "-n",
    "depth",
    type=click.IntRange(MIN_DEPTH, MAX_DEPTH),
    default=3,
    show_default=True,
    help="Recursion depth",
)
@click.option("--outward", is_flag=True, help="Erect the triangular bumps outward instead of inward")
@click.option("--single-edge", "-e", "single_edge", is_flag=True, help="Enlarge one edge instead of the hexagon")
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode Braille")
@click.option("--columns", "-c", "columns", type=click.IntRange(min=1), default=None, help="Output width in characters")
@click.option("--rows", "-r", "rows", type=click.IntRange(min=1), default=None, help="Output height in lines")
@click.option("--animate", is_flag=True, help="Reveal the curve progressively")
@click.option("--interactive", "-i", is_flag=True, help="Pick level/direction/mode with the keyboard")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages to stderr")
def main(
    depth: int,
    outward: bool,
    single_edge: bool,
    use_ascii: bool,
    columns: int | None,
    rows: int | None,
    animate: bool,
    interactive: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Koch curve fractal to ASCII/Unicode terminal art."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    charset = CharSet.Ascii if use_ascii else CharSet.Unicode

    if interactive:
        if not sys.stdin.isatty():
            click.echo("error: interactive mode needs a terminal on stdin", err=True)
            sys.exit(1)
        asyncio.run(run_interactive(charset, columns, rows))
        return

    cols, lines = terminal_canvas_size(columns, rows)

    try:
        if animate and output is None:
            ansi = sys.stdout.isatty()
            rendered = asyncio.run(run_animation(Canvas(cols, lines, charset), depth, outward, single_edge, ansi))
            if ansi:
                click.echo()
                return
        else:
            rendered = render_koch(depth, outward, single_edge, cols, lines, unicode=not use_ascii)
    except KochError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
