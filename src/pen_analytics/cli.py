"""Command-line interface for pen analytics."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Type, TypeVar

import typer
from pydantic import BaseModel, ValidationError

from .analytics import calculate_problem_solving_analytics
from .config import TimelineSettings
from .models import ProblemSolvingAnalytics
from .schemas import AnalyticsRequest, TimelineRequest
from .timeline import build_segments

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

app = typer.Typer(help="Problem-solving activity analytics for pen recordings.")


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@app.command()
def analyze(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON file with a list of segments or {segments, firstReactionTime}.",
    ),
    first_reaction: Optional[float] = typer.Option(
        None,
        "--first-reaction",
        min=0.0,
        help="Seconds before the first pen-down, used when the session has no leading pause.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Summarize a recorded session from its activity segments."""
    request = _load_request(path, AnalyticsRequest, "segments")
    segments = [item.to_segment() for item in request.segments]
    override = first_reaction if first_reaction is not None else request.first_reaction_time
    result = calculate_problem_solving_analytics(segments, override)
    _emit(result, as_json)


@app.command()
def timeline(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON file with a list of raw records or {records, sessionEnd}.",
    ),
    first_reaction: Optional[float] = typer.Option(
        None,
        "--first-reaction",
        min=0.0,
        help="Seconds before the first pen-down, used when the session has no leading pause.",
    ),
    rework_seconds: Optional[float] = typer.Option(
        None,
        "--rework-threshold",
        min=0.0,
        help="Erasing seconds after which a segment counts as rework (default 3).",
    ),
    merge_seconds: Optional[float] = typer.Option(
        None,
        "--merge-window",
        min=0.0,
        help="Records shorter than this merge into a preceding segment of the same type (default 1).",
    ),
    session_end: Optional[int] = typer.Option(
        None,
        "--session-end",
        help="Epoch milliseconds closing the last open record.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print segments and result as JSON."),
) -> None:
    """Build segments from raw recorder records, then summarize them."""
    request = _load_request(path, TimelineRequest, "records")
    records = [item.to_segment() for item in request.records]
    settings = TimelineSettings.from_seconds(
        rework_seconds=rework_seconds, merge_seconds=merge_seconds
    )
    try:
        segments = build_segments(
            records,
            settings,
            session_end=session_end if session_end is not None else request.session_end,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="PATH") from exc
    logger.debug("Built %d segments from %d records.", len(segments), len(records))

    override = first_reaction if first_reaction is not None else request.first_reaction_time
    result = calculate_problem_solving_analytics(segments, override)
    if as_json:
        payload = {
            "segments": [segment.to_dict() for segment in segments],
            "analytics": result.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2))
        return
    _emit(result, as_json=False)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind the API."),
    port: int = typer.Option(
        8765, "--port", min=1, max=65535, help="TCP port for the API."
    ),
    rework_seconds: Optional[float] = typer.Option(
        None, "--rework-threshold", min=0.0, help="Rework threshold in seconds."
    ),
    merge_seconds: Optional[float] = typer.Option(
        None, "--merge-window", min=0.0, help="Merge window in seconds."
    ),
) -> None:
    """Start the HTTP analytics API."""
    from .server_runner import run_server

    settings = TimelineSettings.from_seconds(
        rework_seconds=rework_seconds, merge_seconds=merge_seconds
    )
    run_server(host=host, port=port, settings=settings)


def _load_request(path: Path, model: Type[RequestT], key: str) -> RequestT:
    """Read ``path`` and validate it; a bare JSON list is taken as ``key``."""
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Could not read {path}: {exc}", param_hint="PATH") from exc
    if isinstance(data, list):
        data = {key: data}
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid input in {path}: {exc}", param_hint="PATH") from exc


def _emit(result: ProblemSolvingAnalytics, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return
    from .reporting import SummaryPrinter

    SummaryPrinter().print_summary(result)
