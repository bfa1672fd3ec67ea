"""
CLI Commands Package

This package contains the individual CLI command modules of the SexSec CLI.
"""

from .values import encrypt_value_command, decrypt_value_command
from .files import encrypt_file_command, decrypt_file_command
from .directories import encrypt_dir_command, decrypt_dir_command

__all__ = [
    "encrypt_value_command",
    "decrypt_value_command",
    "encrypt_file_command",
    "decrypt_file_command",
    "encrypt_dir_command",
    "decrypt_dir_command",
]
