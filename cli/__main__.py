"""
CLI Package Main Entry Point

This module allows the CLI package to be executed directly as a module:
python -m cli
"""

from cli import cli

if __name__ == '__main__':
    cli()
