"""Command-line entrypoints for chemp."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from chemp import parse
from chemp.errors import ChempError
from chemp.periodic_table import default_table

app = typer.Typer(add_completion=False)


@app.command("parse")
def parse_formula(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. MgSO4*7H2O.")],
    precision: Annotated[
        int | None, typer.Option(help="Round masses and percentages to N digits.")
    ] = None,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging.")] = False,
) -> None:
    """Print composition, molar mass and mass percentages of a formula."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        compound = parse(formula)
    except ChempError as error:
        typer.echo(f"error: {error}", err=True)
        raise typer.Exit(code=1)

    payload = {"formula": formula, **compound.to_dict(precision)}
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def elements() -> None:
    """List known chemical symbols with their atomic weights."""
    table = {element.symbol: element.atomic_weight for element in default_table()}
    typer.echo(json.dumps(table, indent=2))
