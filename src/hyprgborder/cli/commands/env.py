"""Environment report command."""

import logging

import click

from hyprgborder.environment import check_environment, format_environment_status

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def env(ctx):
    """
    Check that hyprgborder can talk to Hyprland.

    Exits with status 1 if the session is unusable.
    """
    status = check_environment()
    click.echo(format_environment_status(status))

    if not status.is_valid:
        logger.warning(f"Environment check failed: {status.errors}")
        ctx.exit(1)
