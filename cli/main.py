"""
SexSec CLI Main Entry Point

This module serves as the main entry point for the SexSec CLI, bringing
together all commands and the global cipher options.
"""

import logging

import click

from cli.commands import (
    encrypt_value_command,
    decrypt_value_command,
    encrypt_file_command,
    decrypt_file_command,
    encrypt_dir_command,
    decrypt_dir_command,
)
from sexsec import __version__
from sexsec.config import config
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--passphrase', '-p', envvar='SEXSEC_PASSPHRASE', default=config.passphrase or None,
              help='Passphrase the key is derived from (env: SEXSEC_PASSPHRASE; prompted when absent)')
@click.option('--encoding', '-e', default=None,
              help=f'Text encoding of encrypted values (default: {config.cryptography.encoding})')
@click.option('--iv-length', type=int, default=None,
              help=f'IV length in bytes (default: {config.cryptography.iv_length})')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, passphrase: str, encoding: str, iv_length: int) -> None:
    """SexSec - symmetric encryption for text, files and directories

    Values are encrypted deterministically and printed in the configured
    encoding. Files are written next to the original as NAME.sex with a
    random IV; use --force to delete the source after a successful write.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['passphrase'] = passphrase
    ctx.obj['encoding'] = encoding
    ctx.obj['iv_length'] = iv_length

    setup_logging(
        level='DEBUG' if verbose or config.debug else config.logging.level,
        log_file=config.logging.log_file or None,
        log_format=config.logging.format,
        max_files=config.logging.max_files,
    )
    if verbose:
        logger.debug("Verbose mode enabled")

cli.add_command(encrypt_value_command, name='encrypt-value')
cli.add_command(decrypt_value_command, name='decrypt-value')
cli.add_command(encrypt_file_command, name='encrypt-file')
cli.add_command(decrypt_file_command, name='decrypt-file')
cli.add_command(encrypt_dir_command, name='encrypt-dir')
cli.add_command(decrypt_dir_command, name='decrypt-dir')


if __name__ == '__main__':
    cli()
