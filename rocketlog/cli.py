import click

from rocketlog.config import configure_logging
from rocketlog.flows.mission_flow import mission_flow
from rocketlog.models import FuelType, Rocket


@click.group()
def cli() -> None:
    """Fly toy rockets with logged, error-proof launches."""
    configure_logging()


@cli.command("demo")
def demo_command() -> None:
    """Fly the Apollo 11-14 mission sequence."""
    for report in mission_flow():
        click.echo(f"{report.call_sign}: {report.fuel_type.value} -> {report.energy}")


@cli.command("launch")
@click.option(
    "--fuel-type",
    type=click.Choice([fuel_type.value for fuel_type in FuelType]),
    default=FuelType.LIQUID_FUEL.value,
    show_default=True,
)
@click.option("--quantity", type=float, default=100, show_default=True)
@click.option("--countdown", type=int, default=10, show_default=True)
@click.option("--call-sign", default="Apollo X", show_default=True)
def launch_command(fuel_type: str, quantity: float, countdown: int, call_sign: str) -> None:
    """Fuel up a single rocket and launch it."""
    rocket = Rocket()
    rocket.fuel_up(quantity, FuelType(fuel_type))
    energy = rocket.launch(countdown, call_sign)

    if energy == -1:
        click.echo(f"{call_sign} failed to launch.")
    else:
        click.echo(f"{call_sign} launched with {energy} units of energy.")


if __name__ == "__main__":
    cli()
