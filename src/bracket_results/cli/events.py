from __future__ import annotations

import json

import typer

from bracket_results.core.config import settings
from bracket_results.core.logging import setup_logging
from bracket_results.providers.base.errors import ProviderError
from bracket_results.providers.smashgg.client import SmashggClient
from bracket_results.providers.smashgg.errors import NameParseError, UrlParseError
from bracket_results.providers.smashgg.results import get_events
from bracket_results.providers.smashgg.types import SourceEnum

app = typer.Typer(help="Look up player standings on smash.gg.")


@app.command("events")
def events_cmd(
    url: str = typer.Option(
        ..., "--url", help="Tournament or event URL (or a bare tournament slug with --source other)."
    ),
    source: str = typer.Option(
        SourceEnum.SMASHGG.value,
        "--source",
        help="Where the URL came from; anything but 'smashgg' is treated as a tournament slug.",
    ),
    players: list[str] = typer.Option(
        [],
        "--player",
        "-p",
        help="Player search term (repeatable, order is preserved).",
    ),
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Resolve a smash.gg URL and print matched standings as JSON."""

    setup_logging(log_level)

    try:
        with SmashggClient.from_settings(settings) as client:
            result = get_events(url=url, source=source, players=players, client=client)
    except (UrlParseError, NameParseError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    except (ProviderError, RuntimeError) as e:
        typer.echo(f"Request failed: {e}", err=True)
        raise typer.Exit(code=2) from e

    if isinstance(result, list):
        out = [item.as_dict() for item in result]
    else:
        out = result.as_dict()

    typer.echo(json.dumps(out, indent=2))
