"""Typer CLI: correct line directions on the configured feature layers."""
from __future__ import annotations

from typing import Optional
import logging

import typer

from rail_direction.core.errors import CorrectionError
from rail_direction.correction.pipeline import run_correction
from rail_direction.service.arcgis import ArcGISFeatureClient

app = typer.Typer(help="Reverse railway line segments whose path starts at the code2 station")


@app.command()
def fix(
    token: Optional[str] = typer.Argument(None, help="ArcGIS token used for the query and update calls"),
) -> None:
    """Fetch stations and lines, reverse the misdirected lines and submit them in one update."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        run_correction(token, ArcGISFeatureClient())
    except CorrectionError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
