"""
PlaydateKit CLI command implementations.

Each module exposes handlers taking parsed arguments and returning an exit code.
"""
