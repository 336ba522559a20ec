"""VitalScore CLI — entry point for assess and trends commands."""

import click

from vitalscore import __version__

from .common import configure


@click.group()
@click.version_option(version=__version__, package_name="vitalscore")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--log-level", default=None, help="Override logging.level (DEBUG, INFO, WARNING …).")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """VitalScore — score health metrics and track trends."""
    ctx.obj = configure(config_file, log_level)


# Register subcommands
from .assess_cmd import assess
from .trends_cmd import trends

main.add_command(assess)
main.add_command(trends)
