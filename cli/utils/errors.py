"""
CLI Error Handling Utilities

This module contains the function used by every command to report failures
consistently.
"""

import logging
import sys

import click

logger = logging.getLogger(__name__)


def handle_cli_error(error: Exception, error_msg: str, ctx: click.Context) -> None:
    """Handle CLI errors consistently."""
    logger.debug("%s failed: %s", ctx.command_path, error_msg)
    if ctx.obj.get('verbose'):
        logger.exception("Full traceback:")
    click.echo(f"❌ {error_msg}", err=True)
    sys.exit(1)
