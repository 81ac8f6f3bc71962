"""
Entry point for running PlaydateKit CLI as a module.

Usage: python -m playdatekit [command] [options]
"""

from playdatekit.cli.parser import main

if __name__ == "__main__":
    main()
