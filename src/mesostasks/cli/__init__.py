"""
Command-line interface for the mesostasks package.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
