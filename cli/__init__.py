"""
Command-line front end for burstkit.

Converts account IDs to addresses and back.
"""

from .address_cli import main

__all__ = ["main"]
