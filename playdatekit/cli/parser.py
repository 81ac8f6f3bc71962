"""
PlaydateKit CLI argument parser.

This module implements the command-line interface for PlaydateKit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from playdatekit import __version__
from playdatekit.core.exceptions import PlaydateKitError

logger = logging.getLogger(__name__)

# command -> (module, handler)
COMMANDS = {
    "sdk-path": ("playdatekit.cli.commands.sdk", "run"),
    "lsp-command": ("playdatekit.cli.commands.lsp", "run_command"),
    "lsp-config": ("playdatekit.cli.commands.lsp", "run_config"),
    "debug": ("playdatekit.cli.commands.debug", "run"),
    "request-kind": ("playdatekit.cli.commands.debug", "run_request_kind"),
}


class CLI:
    """PlaydateKit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="pdkit",
            description="PlaydateKit - language server and debugger setup for Playdate projects",
            epilog='Use "pdkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"PlaydateKit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./playdatekit.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project (worktree) root directory (default: current directory)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        subparsers.add_parser(
            "sdk-path",
            help="Print the detected Playdate SDK path",
            description="Print the Playdate SDK path from PLAYDATE_SDK_PATH or the platform default",
        )
        subparsers.add_parser(
            "lsp-command",
            help="Resolve the lua-language-server executable",
            description="Find lua-language-server on PATH or download the latest release",
        )

        lsp_config = subparsers.add_parser(
            "lsp-config",
            help="Print language server settings",
            description="Print the settings payload sent to lua-language-server",
        )
        lsp_config.add_argument(
            "--initialization",
            action="store_true",
            help="Print initialization options instead of workspace settings",
        )

        self._add_debug_command(subparsers)

        request_kind = subparsers.add_parser(
            "request-kind",
            help="Print whether a debug configuration launches or attaches",
        )
        request_kind.add_argument(
            "debug_config",
            metavar="CONFIG",
            help="Debug configuration: JSON file path, inline JSON, or '-' for stdin",
        )

        return parser

    def _add_debug_command(self, subparsers):
        """Add 'debug' subcommand."""
        parser = subparsers.add_parser(
            "debug",
            help="Resolve a Playdate debug configuration",
            description="Print the simulator command and connection for a debug configuration",
        )
        parser.add_argument(
            "debug_config",
            metavar="CONFIG",
            help="Debug configuration: JSON file path, inline JSON, or '-' for stdin",
        )
        parser.add_argument(
            "--host",
            metavar="ADDRESS",
            help="Simulator debug server address (default: 127.0.0.1)",
        )
        parser.add_argument(
            "--port", type=int, metavar="PORT", help="Debug server port (default: 55934)"
        )
        parser.add_argument(
            "--timeout",
            type=int,
            metavar="MS",
            help="Connection timeout in milliseconds (default: 5000)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except PlaydateKitError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stderr,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        target = COMMANDS.get(args.command)
        if not target:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module_name, handler_name = target
        module = importlib.import_module(module_name)
        return getattr(module, handler_name)(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
