"""CLI for imgpad."""

from __future__ import annotations

import logging
import sys

import click

from .config import DEFAULT_BACKGROUND, DEFAULT_PADDING, ConversionConfig
from .convert import convert_image
from .errors import ImgpadError

logger = logging.getLogger(__name__)


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False))
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.option("--bg", default=DEFAULT_BACKGROUND, show_default=True,
              help="Background color for jpeg output (name or hex)")
@click.option("--padding", default=DEFAULT_PADDING,
              help="Padding: 'all', 'vertical,horizontal' or 'top,right,bottom,left'")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def cli(input_file: str, output_file: str, bg: str, padding: str, verbose: bool) -> None:
    """Convert INPUT_FILE between png and jpeg, adding optional padding."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    click.echo(f"Converting: {input_file}")

    try:
        config = ConversionConfig.from_options(bg=bg, padding=padding)
        convert_image(input_file, output_file, config)
    except (ImgpadError, OSError) as e:
        logger.error("%s", e)
        sys.exit(1)

    click.echo(f"Image converted: {output_file}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
