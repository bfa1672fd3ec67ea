"""
Directory Commands

This module contains the commands that walk a directory tree and encrypt or
decrypt every file in it, one file at a time. The first failure stops the
walk; files handled before it keep their new state.
"""

import logging

import click

from cli.utils import handle_cli_error, resolve_settings
from sexsec.core import tree_walker
from utils.errors import SexSecError

logger = logging.getLogger(__name__)

FORCE_HELP = 'Delete each source file once its output is written'


@click.command()
@click.argument('path', type=click.Path(file_okay=False))
@click.option('--force', '-f', is_flag=True, help=FORCE_HELP)
@click.pass_context
def encrypt_dir_command(ctx: click.Context, path: str, force: bool) -> None:
    """Recursively encrypt every file under PATH."""
    try:
        settings = resolve_settings(ctx)
        outputs = tree_walker.encrypt_tree(path, settings, force=force)
        if ctx.obj.get('verbose'):
            for output in outputs:
                click.echo(f"  {output}")
        click.echo(f"✅ Encrypted {len(outputs)} file(s) under {path}")
    except SexSecError as e:
        handle_cli_error(e, f"Failed to encrypt directory {path}: {e}", ctx)


@click.command()
@click.argument('path', type=click.Path(file_okay=False))
@click.option('--force', '-f', is_flag=True, help=FORCE_HELP)
@click.pass_context
def decrypt_dir_command(ctx: click.Context, path: str, force: bool) -> None:
    """Recursively decrypt every .sex file under PATH."""
    try:
        settings = resolve_settings(ctx)
        outputs = tree_walker.decrypt_tree(path, settings, force=force)
        if ctx.obj.get('verbose'):
            for output in outputs:
                click.echo(f"  {output}")
        click.echo(f"✅ Decrypted {len(outputs)} file(s) under {path}")
    except SexSecError as e:
        handle_cli_error(e, f"Failed to decrypt directory {path}: {e}", ctx)
