"""
Entry point for running PlaydateKit CLI as a module.

Usage: python -m playdatekit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
