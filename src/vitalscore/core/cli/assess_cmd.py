"""vitalscore assess — score one metrics file."""

from __future__ import annotations

import click


@click.command()
@click.argument("metrics_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--now", "timestamp", default=None, help="Assessment timestamp (ISO 8601). Defaults to now.")
def assess(metrics_file: str, timestamp: str | None) -> None:
    """Score the health metrics in METRICS_FILE and print the assessment as JSON."""
    from vitalscore.core.cli.common import echo_json, fail, load_data_file
    from vitalscore.core.exceptions import InvalidInput
    from vitalscore.health import assess as run_assessment
    from vitalscore.health.parsing import parse_timestamp

    try:
        now = parse_timestamp(timestamp) if timestamp else None
        assessment = run_assessment(load_data_file(metrics_file), now=now)
    except InvalidInput as e:
        fail(str(e))

    echo_json(assessment.to_dict())
