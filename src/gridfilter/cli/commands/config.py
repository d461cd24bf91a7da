"""
Configuration management commands.
"""

import click


@click.group()
def config():
    """Configuration management."""
    pass


@config.command("show")
def config_show():
    """Display current configuration."""
    from gridfilter.config import get_settings

    settings = get_settings()
    click.echo(settings.model_dump_json(indent=2))
