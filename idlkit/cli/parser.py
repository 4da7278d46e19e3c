"""
idlkit CLI argument parser.

This module implements the command-line interface for idlkit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from idlkit import __version__

logger = logging.getLogger(__name__)


class CLI:
    """idlkit command-line interface."""

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
            prog="idlkit",
            description="idlkit - generate sources from IDL with omniidl",
            epilog='Use "idlkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"idlkit {__version__}"
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
            help="Path to configuration file (default: ./idlkit.yaml)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Project root directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_generate_command(subparsers)
        self._add_show_command_command(subparsers)

        return parser

    def _add_generate_command(self, subparsers):
        """Add 'generate' subcommand."""
        parser = subparsers.add_parser(
            "generate",
            help="Compile IDL sources",
            description="Run omniidl once for every configured IDL source",
        )
        self._add_compiler_options(parser)

    def _add_show_command_command(self, subparsers):
        """Add 'show-command' subcommand."""
        parser = subparsers.add_parser(
            "show-command",
            help="Print the omniidl command line",
            description="Print the omniidl command line without running it",
        )
        self._add_compiler_options(parser)

    def _add_compiler_options(self, parser):
        """Add options overriding the configuration file."""
        parser.add_argument(
            "inputs",
            nargs="*",
            metavar="INPUT",
            help="IDL files or directories (replaces configured inputs)",
        )
        parser.add_argument(
            "--output-dir",
            metavar="DIR",
            help="Directory for generated sources",
        )
        parser.add_argument(
            "--backend",
            "-b",
            metavar="NAME",
            help="omniidl back end (e.g., cxx, python)",
        )
        parser.add_argument(
            "--executable",
            metavar="PATH",
            help="IDL compiler executable (default: omniidl)",
        )
        parser.add_argument(
            "--define",
            "-D",
            action="append",
            metavar="NAME=VALUE",
            help="Define preprocessor symbol (can be used multiple times)",
        )
        parser.add_argument(
            "--include",
            "-I",
            action="append",
            metavar="DIR",
            help="Add preprocessor include directory (can be used multiple times)",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            metavar="SECONDS",
            help="Fail if a single compiler run takes longer than this",
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

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        return self._dispatch_command(parsed_args)

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
        command_map = {
            "generate": "idlkit.cli.commands.generate",
            "show-command": "idlkit.cli.commands.show_command",
        }

        module_name = command_map.get(args.command)
        if module_name is None:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
