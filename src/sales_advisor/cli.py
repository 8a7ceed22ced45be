from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .client import GenerationClient, set_client
from .config import Settings, normalize_language
from .errors import AdvisorError, ConfigError
from .insights import run_dataset_insights
from .models import AdvisorRequest
from .suggestions import get_variable_suggestions

app = typer.Typer(add_completion=False, help="Sales dataset advisor backed by a hosted LLM")


@app.callback()
def _configure_logging(
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level"),
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_request(path: Path) -> AdvisorRequest:
    try:
        obj = json.loads(path.read_text(encoding="utf-8"))
        return AdvisorRequest.model_validate(obj)
    except (json.JSONDecodeError, ValidationError) as e:
        typer.echo(f"Invalid request file {path}: {e}", err=True)
        raise typer.Exit(code=2) from e


def _install_client(model: Optional[str], language: Optional[str]) -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2) from e
    updates: dict[str, object] = {}
    if model:
        updates["model"] = model
    if language:
        updates["language"] = normalize_language(language)
    if updates:
        settings = settings.model_copy(update=updates)
    set_client(GenerationClient(settings))


@app.command()
def insights(
    request: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with headers, stats and sample"),
    model: Optional[str] = typer.Option(None, "--model", help="Model identifier"),
    language: Optional[str] = typer.Option(None, "--language", help="es | en"),
    sample_rows: int = typer.Option(5, "--sample-rows", min=1, help="Rows of the sample to send"),
):
    """
    Print a Markdown analysis of the dataset summary.

    Exits with code 1 when the service could not produce one; the error text
    is still printed.
    """
    req = _load_request(request)
    _install_client(model, language)
    outcome = run_dataset_insights(req.headers, req.stats, req.sample[:sample_rows])
    typer.echo(outcome.text)
    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command()
def suggest(
    request: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with headers and sample"),
    model: Optional[str] = typer.Option(None, "--model", help="Model identifier"),
    language: Optional[str] = typer.Option(None, "--language", help="es | en"),
    strict: bool = typer.Option(False, "--strict", help="Reject suggested names that are not headers"),
):
    """
    Print the suggested dependent and independent variables as JSON.
    """
    req = _load_request(request)
    _install_client(model, language)
    try:
        suggestion = get_variable_suggestions(req.headers, req.sample, strict=strict)
    except AdvisorError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    typer.echo(json.dumps(suggestion.to_wire(), indent=2, ensure_ascii=False))
