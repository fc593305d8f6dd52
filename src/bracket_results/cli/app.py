from __future__ import annotations

import typer

from bracket_results.cli.events import app as events_app

app = typer.Typer(no_args_is_help=True)
app.add_typer(events_app, name="smashgg")
