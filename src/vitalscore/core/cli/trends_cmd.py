"""vitalscore trends — summarize a stored assessment history."""

from __future__ import annotations

import click

from vitalscore.health.calculators.trends import TimeWindow


@click.command()
@click.argument("history_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--window",
    type=click.Choice([w.value for w in TimeWindow]),
    default=None,
    help="Look-back window. Defaults to trends.default_window.",
)
@click.option("--limit", type=int, default=None, help="Only use the N most recent assessments.")
@click.option("--now", "timestamp", default=None, help="Window end (ISO 8601). Defaults to now.")
@click.option("--strict", is_flag=True, help="Fail when fewer than two assessments are in range.")
@click.pass_obj
def trends(
    config,
    history_file: str,
    window: str | None,
    limit: int | None,
    timestamp: str | None,
    strict: bool,
) -> None:
    """Print time series and trend summary for the assessments in HISTORY_FILE.

    HISTORY_FILE holds a list of stored assessment records, or an object
    with a "predictions" list.
    """
    from vitalscore.core.cli.common import echo_json, fail, load_data_file
    from vitalscore.core.exceptions import InsufficientHistory, InvalidInput
    from vitalscore.health import AssessmentEngine, load_history
    from vitalscore.health.calculators.trends import latest
    from vitalscore.health.parsing import parse_timestamp

    engine = AssessmentEngine.from_config(config)

    try:
        data = load_data_file(history_file)
        records = data.get("predictions", []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            fail("History file must contain a list of assessment records")

        history = load_history(records)
        if limit is not None:
            history = latest(history, limit)
        now = parse_timestamp(timestamp) if timestamp else None
        report = engine.history_report(history, window, now)
        if strict and report.summary is None:
            raise InsufficientHistory(f"Only {report.count} assessment(s) in the {report.window} window")
    except (InvalidInput, InsufficientHistory) as e:
        fail(str(e))

    echo_json(report.to_dict())
