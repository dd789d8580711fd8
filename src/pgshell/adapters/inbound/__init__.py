"""Inbound adapters - entry points that drive the application."""

from pgshell.adapters.inbound.cli import main

__all__ = [
    "main",
]
