import logging
from pathlib import Path

import click

from kiosk.infrastructure.bootstrap import DEFAULT_DATA_DIR
from kiosk.infrastructure.cli.store_commands import checkout, shop, stock


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="KIOSK_DATA_DIR",
    show_default=True,
    help="Directory holding products.md and promotions.md.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """W편의점 — checkout kiosk"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


# Register subcommands
cli.add_command(checkout)
cli.add_command(shop)
cli.add_command(stock)
