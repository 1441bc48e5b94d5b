"""Share commands for encoding and decoding design share links.

The ``share`` command group turns a design file into a share link and a
share link (or bare token) back into a design with its price.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from everwood.application import DesignConfigurationStore, EverwoodConfiguration
from everwood.domain import DesignConfiguration, IncompleteConfigurationError
from everwood.infrastructure import (
    DesignSummaryFormatter,
    PriceBreakdownFormatter,
    ShareTokenError,
    extract_state_from_short_url,
    parse_share_link,
)

share_app = typer.Typer(
    name="share",
    help="Encode and decode design share links.",
)


def _settings(ctx: typer.Context) -> EverwoodConfiguration:
    return ctx.obj if isinstance(ctx.obj, EverwoodConfiguration) else EverwoodConfiguration()


def _load_design(path: Path) -> DesignConfiguration:
    if not path.exists():
        typer.echo(f"Error: Design file not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in design file: {path}: {e.msg}", err=True)
        raise typer.Exit(code=1)
    if not isinstance(data, dict):
        typer.echo("Error: Design file must contain a JSON object", err=True)
        raise typer.Exit(code=1)
    try:
        return DesignConfiguration.from_share_state(data)
    except IncompleteConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@share_app.command(name="encode")
def encode(
    ctx: typer.Context,
    design: Annotated[
        Path | None,
        typer.Option("--design", "-d", help="Design JSON file (defaults to the starter design)"),
    ] = None,
    short: Annotated[bool, typer.Option("--short", help="Generate the short link format")] = False,
) -> None:
    """Print a share link for a design.

    Examples:
        everwood share encode --design my-panel.json
        everwood share encode --design my-panel.json --short
    """
    configuration = _load_design(design) if design else DesignConfiguration()
    store = DesignConfigurationStore(configuration, _settings(ctx).share)
    if short:
        typer.echo(store.generate_short_shareable_link())
    else:
        typer.echo(store.generate_shareable_link())


@share_app.command(name="decode")
def decode(
    link: Annotated[str, typer.Argument(help="Share link, query string or bare token")],
    short: Annotated[
        bool, typer.Option("--short", help="Treat a bare token as the short format")
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the design as JSON")] = False,
) -> None:
    """Decode a share link and show the design with its price.

    Exits with code 1 when the token is corrupt or the design is incomplete.
    """
    try:
        if short and "=" not in link:
            state = extract_state_from_short_url(link.strip())
        else:
            state = parse_share_link(link)
        configuration = DesignConfiguration.from_share_state(state)
    except ShareTokenError as e:
        typer.echo(f"Error: Invalid share link: {e}", err=True)
        raise typer.Exit(code=1)
    except IncompleteConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    store = DesignConfigurationStore(configuration)
    if as_json:
        typer.echo(
            json.dumps(
                {
                    "configuration": configuration.to_share_state(),
                    "pricing": store.pricing.to_dict(),
                },
                indent=2,
            )
        )
        return

    typer.echo(DesignSummaryFormatter().format(configuration))
    typer.echo()
    typer.echo(PriceBreakdownFormatter().format(store.pricing))
