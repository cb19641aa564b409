import logging

import click

from burgerbuilder.infrastructure.cli.menu_commands import menu
from burgerbuilder.infrastructure.cli.order_commands import order


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log domain events.")
def cli(verbose: bool) -> None:
    """Santto Hambúrguer — build a burger and send the order."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
cli.add_command(menu)
cli.add_command(order)
