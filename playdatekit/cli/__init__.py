"""
PlaydateKit command-line interface.
"""

from playdatekit.cli.parser import CLI, main

__all__ = ["CLI", "main"]
