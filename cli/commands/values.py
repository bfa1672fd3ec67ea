"""
Value Commands

This module contains the commands that encrypt and decrypt short text
values. Tokens are deterministic: the same text and passphrase always give
the same token.
"""

import logging

import click

from cli.utils import handle_cli_error, resolve_settings
from sexsec.core import cipher_engine
from utils.errors import SexSecError

logger = logging.getLogger(__name__)


@click.command()
@click.argument('text')
@click.pass_context
def encrypt_value_command(ctx: click.Context, text: str) -> None:
    """Encrypt TEXT and print the token."""
    try:
        settings = resolve_settings(ctx)
        click.echo(cipher_engine.encrypt_value(text, settings))
    except SexSecError as e:
        handle_cli_error(e, f"Failed to encrypt value: {e}", ctx)


@click.command()
@click.argument('token')
@click.pass_context
def decrypt_value_command(ctx: click.Context, token: str) -> None:
    """Decrypt TOKEN and print the text."""
    try:
        settings = resolve_settings(ctx)
        click.echo(cipher_engine.decrypt_value(token, settings))
    except SexSecError as e:
        handle_cli_error(e, f"Failed to decrypt value: {e}", ctx)
