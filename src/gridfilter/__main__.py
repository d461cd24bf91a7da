"""
gridfilter CLI entry point.

Usage:
    gridfilter filter PATH --where COLUMN=KEYWORD [--where ...] [--strategy S]
    gridfilter classify KEYWORD [--strategy S]
    gridfilter config show
"""

import click

from gridfilter.cli.commands import classify, config, filter_command


@click.group()
@click.version_option(package_name="gridfilter")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Override the configured log level")
@click.option("--log-json", is_flag=True, help="Emit JSON log lines")
def cli(log_level: str | None, log_json: bool):
    """gridfilter - Column filters for tabular data"""
    from gridfilter.config import get_settings
    from gridfilter.logging import setup_logging

    settings = get_settings().logging
    setup_logging(
        level=log_level or settings.level,
        json_format=log_json or settings.format == "json",
        log_file=settings.file,
    )


cli.add_command(filter_command)
cli.add_command(classify)
cli.add_command(config)


def main():
    cli()


if __name__ == "__main__":
    main()
