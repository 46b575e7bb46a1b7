
"""
CLI package for pedigree_builder.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from pedigree_builder.cli.app import app, main

__all__ = [
    "app",
    "main",
]
