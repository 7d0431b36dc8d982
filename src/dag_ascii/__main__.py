"""CLI entry point for dag-ascii."""

import logging
import sys

import click

from dag_ascii import render_dsl
from dag_ascii.config import RenderConfig


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--spacing", "-s", "spacing", type=click.IntRange(min=0), default=1, help="Gap between sibling branches")
@click.option("--root", "-r", "root", type=str, default=None, help="Node id to draw from (default: the only root)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log layout details to stderr")
def main(input: str | None, use_ascii: bool, spacing: int, root: str | None, output: str | None, verbose: bool) -> None:
    """Draw a DAG edge list as box-drawing text."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    config = RenderConfig(unicode=not use_ascii, spacing=spacing, root=root)
    try:
        rendered = render_dsl(text, config)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if rendered:
        rendered += "\n"

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
