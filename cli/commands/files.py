"""
File Commands

This module contains the commands that encrypt a single file into
``<name>.sex`` and decrypt it back.
"""

import logging

import click

from cli.utils import handle_cli_error, resolve_settings
from sexsec.core import cipher_engine
from utils.errors import SexSecError

logger = logging.getLogger(__name__)

FORCE_HELP = 'Delete the source file once the output is written'


@click.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--force', '-f', is_flag=True, help=FORCE_HELP)
@click.pass_context
def encrypt_file_command(ctx: click.Context, path: str, force: bool) -> None:
    """Encrypt the file at PATH."""
    try:
        settings = resolve_settings(ctx)
        if ctx.obj.get('verbose'):
            logger.debug(f"Encrypting {path} (force={force})")
        output = cipher_engine.encrypt_file(path, settings, force=force)
        click.echo(f"✅ Encrypted {path} -> {output}")
    except SexSecError as e:
        handle_cli_error(e, f"Failed to encrypt {path}: {e}", ctx)


@click.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--force', '-f', is_flag=True, help=FORCE_HELP)
@click.pass_context
def decrypt_file_command(ctx: click.Context, path: str, force: bool) -> None:
    """Decrypt the .sex file at PATH."""
    try:
        settings = resolve_settings(ctx)
        if ctx.obj.get('verbose'):
            logger.debug(f"Decrypting {path} (force={force})")
        output = cipher_engine.decrypt_file(path, settings, force=force)
        click.echo(f"✅ Decrypted {path} -> {output}")
    except SexSecError as e:
        handle_cli_error(e, f"Failed to decrypt {path}: {e}", ctx)
