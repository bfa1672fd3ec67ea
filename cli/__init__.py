"""
SexSec CLI Package

This package provides a command-line interface for encrypting and decrypting
text values, single files and whole directory trees.
"""

from .main import cli

__version__ = "1.0.0"
__all__ = ["cli"]
