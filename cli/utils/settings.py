"""
CLI Settings Utilities

Turns the global CLI options into the immutable cipher settings handed to
the engine.
"""

import click

from sexsec.core.state import CipherSettings


def resolve_settings(ctx: click.Context) -> CipherSettings:
    """
    Build cipher settings from the options stored on the root context.

    The passphrase is prompted for (without echo) when neither --passphrase
    nor SEXSEC_PASSPHRASE supplied one.
    """
    options = ctx.obj
    passphrase = options.get('passphrase')
    if not passphrase:
        passphrase = click.prompt('Passphrase', hide_input=True)
    return CipherSettings.create(
        passphrase=passphrase,
        encoding=options.get('encoding'),
        iv_length=options.get('iv_length'),
    )
