"""Palette commands: harmony generation, paint mixing and blending."""

import json
from typing import Annotated

import typer

from everwood.domain import InvalidColorError
from everwood.domain.services import (
    HarmonyType,
    blend_colors,
    generate_harmony,
    mix_paint_colors,
)
from everwood.infrastructure import PaletteFormatter


def palette_command(
    harmony: Annotated[HarmonyType, typer.Argument(help="Harmony to generate")],
    color: Annotated[str, typer.Argument(help="Base color, e.g. '#6D28D9'")],
    count: Annotated[
        int,
        typer.Option("--count", "-n", min=1, help="Colors to generate (analogous, monochromatic, shades)"),
    ] = 5,
    as_json: Annotated[bool, typer.Option("--json", help="Print colors as a JSON array")] = False,
) -> None:
    """Generate a harmony palette from a base color.

    Examples:
        everwood palette triadic "#6D28D9"
        everwood palette monochromatic 2A9D8F --count 7
    """
    try:
        colors = generate_harmony(color, harmony, count)
    except InvalidColorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(colors))
    else:
        typer.echo(PaletteFormatter().format(colors, title=harmony.value.upper()))


def mix_command(
    colors: Annotated[list[str], typer.Argument(help="Colors to mix")],
) -> None:
    """Mix paint colors by averaging their channels.

    Example:
        everwood mix "#FF0000" "#0000FF"
    """
    try:
        typer.echo(mix_paint_colors(colors))
    except InvalidColorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def blend_command(
    start: Annotated[str, typer.Argument(help="Color to blend from")],
    end: Annotated[str, typer.Argument(help="Color to blend toward")],
    count: Annotated[int, typer.Option("--count", "-n", min=1, help="Number of blends")] = 3,
) -> None:
    """Print intermediate colors between two palette colors."""
    try:
        colors = blend_colors(start, end, count)
    except InvalidColorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(PaletteFormatter().format(colors, title="BLEND"))
