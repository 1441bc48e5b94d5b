"""Typer CLI for panel pricing, palettes and share links."""

import json
from pathlib import Path
from typing import Annotated

import typer

from everwood.application import ConfigError, EverwoodConfiguration, load_config
from everwood.application.config import LoggingConfig
from everwood.cli.commands import blend_command, mix_command, palette_command, share_app
from everwood.domain import STANDARD_SIZES, Dimensions, ShippingSpeed, calculate_price
from everwood.infrastructure import PriceBreakdownFormatter
from everwood.infrastructure.logging import setup_logging

app = typer.Typer(
    name="everwood",
    help="Price, color and share custom wooden art panels.",
    no_args_is_help=True,
)

app.command(name="palette")(palette_command)
app.command(name="mix")(mix_command)
app.command(name="blend")(blend_command)
app.add_typer(share_app, name="share")


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON application configuration"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Load application configuration and set up logging."""
    settings = EverwoodConfiguration()
    if config is not None:
        try:
            settings = load_config(config)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    if verbose:
        setup_logging(LoggingConfig(level="DEBUG", format=settings.logging.format))
    elif config is not None:
        setup_logging(settings.logging)

    ctx.obj = settings


@app.command()
def price(
    width: Annotated[int, typer.Option("--width", "-w", help="Panel width in blocks")],
    height: Annotated[int, typer.Option("--height", "-h", help="Panel height in blocks")],
    shipping: Annotated[
        ShippingSpeed, typer.Option("--shipping", "-s", help="Shipping speed")
    ] = ShippingSpeed.STANDARD,
    as_json: Annotated[bool, typer.Option("--json", help="Print the breakdown as JSON")] = False,
) -> None:
    """Show the price breakdown for a panel size."""
    try:
        dimensions = Dimensions(width=width, height=height)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    breakdown = calculate_price(dimensions, shipping)
    if as_json:
        typer.echo(json.dumps(breakdown.to_dict(), indent=2))
    else:
        typer.echo(PriceBreakdownFormatter().format(breakdown))


@app.command()
def sizes() -> None:
    """List the standard catalogue sizes with their standard-shipping totals."""
    typer.echo("Standard sizes:")
    typer.echo()
    for size, label in STANDARD_SIZES.items():
        breakdown = calculate_price(Dimensions.from_size_string(size))
        typer.echo(f"  {size:<9} {label:<14} ${breakdown.total:>9,.2f}")


if __name__ == "__main__":
    app()
