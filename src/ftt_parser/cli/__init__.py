"""
CLI package for ftt_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from ftt_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
