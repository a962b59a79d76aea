"""Command line interface for Scrollwise."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import typer

from .config import ScrollwiseConfig, load_config
from .data import load_sample_records
from .diagnostics import build_report
from .events import WatchEvent
from .feed import FeedEngine
from .guardrail import AttentionGuardrail
from .logging import configure_logging, get_logger
from .utils import load_records

LOGGER = get_logger(__name__)

EVENTS_ARGUMENT = typer.Argument(..., help="Watch events as JSON, JSONL or YAML.")
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to Scrollwise configuration.",
)
WORD_COUNT_OPTION = typer.Option(
    None,
    help="Number of search terms to generate.",
)
HOUR_OPTION = typer.Option(
    None,
    help="Hour of day (0-23) the session runs at.",
)
REPORT_OUTPUT_OPTION = typer.Option(
    None,
    help="Optional path to write the JSON report.",
)

app = typer.Typer(
    help="Generate feed queries and wellbeing reports from watch history."
)


def _load_events(path: Path) -> List[WatchEvent]:
    events = [WatchEvent.from_dict(record) for record in load_records(path)]
    LOGGER.info("Loaded %d watch events from %s", len(events), path)
    return events


def _build_engine(events: List[WatchEvent], config: ScrollwiseConfig) -> FeedEngine:
    engine = FeedEngine(config.feed)
    for event in events:
        engine.add_watch(event)
    return engine


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


@app.command()
def query(
    events_path: Path = EVENTS_ARGUMENT,
    word_count: int | None = WORD_COUNT_OPTION,
    config_path: Path | None = CONFIG_OPTION,
) -> None:
    """Print the next search query as a JSON list."""

    config = load_config(config_path)
    engine = _build_engine(_load_events(events_path), config)
    typer.echo(json.dumps(engine.generate_query(word_count)))


@app.command()
def report(
    events_path: Path = EVENTS_ARGUMENT,
    hour: int | None = HOUR_OPTION,
    word_count: int | None = WORD_COUNT_OPTION,
    config_path: Path | None = CONFIG_OPTION,
    output: Path | None = REPORT_OUTPUT_OPTION,
) -> None:
    """Replay watch events through the guardrail and feed engine."""

    config = load_config(config_path)
    guardrail = AttentionGuardrail(
        hour=config.hour if hour is None else hour,
        break_override=config.break_override,
        config=config.guardrail,
    )
    events = _load_events(events_path)
    for event in events:
        guardrail.record(event)
    engine = _build_engine(events, config)
    result = build_report(guardrail, engine, word_count)
    typer.echo(result.render_text())
    if output is not None:
        result.to_json(output)
        LOGGER.info("Wrote report to %s", output)


@app.command()
def sample() -> None:
    """Print the bundled sample watch history."""

    typer.echo(json.dumps(load_sample_records(), indent=2))


if __name__ == "__main__":
    app()
