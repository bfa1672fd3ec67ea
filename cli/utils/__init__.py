"""
CLI Utilities Package

This package contains helpers shared by the CLI commands: error handling and
building cipher settings from the global options.
"""

from .errors import handle_cli_error
from .settings import resolve_settings

__all__ = [
    "handle_cli_error",
    "resolve_settings",
]
