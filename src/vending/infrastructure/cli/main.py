import click
from pydantic import ValidationError as SettingsError

from vending.infrastructure.bootstrap import get_settings
from vending.infrastructure.cli.change_commands import change
from vending.infrastructure.cli.machine_commands import machine_run
from vending.infrastructure.cli.money_commands import coins_ops, coins_recognize, money_calc
from vending.infrastructure.cli.product_commands import product_sort
from vending.infrastructure.cli.slot_commands import slot_load
from vending.infrastructure.logging_config import setup_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level for stderr output. Defaults to VENDING_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """Vending: coin-operated vending machine toolkit"""
    try:
        settings = get_settings()
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    setup_logging(log_level or settings.log_level)


@cli.group()
def money() -> None:
    """Amount arithmetic."""


@cli.group()
def coins() -> None:
    """Coins and coin bags."""


@cli.group()
def slot() -> None:
    """Single slot loading."""


@cli.group()
def product() -> None:
    """Products."""


@cli.group()
def machine() -> None:
    """Whole machine sessions."""


# Register subcommands
cli.add_command(change)
money.add_command(money_calc)
coins.add_command(coins_recognize)
coins.add_command(coins_ops)
slot.add_command(slot_load)
product.add_command(product_sort)
machine.add_command(machine_run)
