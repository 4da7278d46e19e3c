"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from idlkit.config.parser import DEFAULT_CONFIG_NAME, load_config_data
from idlkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration Management
# ============================================================================


def resolve_config_file(project_root: Path, config_file: Optional[Path] = None) -> Path:
    """
    Determine which configuration file a command should read.

    Args:
        project_root: Project root directory
        config_file: Explicit --config value, if any

    Returns:
        Path to the configuration file (which may not exist)
    """
    if config_file:
        return config_file
    return project_root / DEFAULT_CONFIG_NAME


def load_command_config(args, required: bool) -> Dict[str, Any]:
    """
    Load the configuration file named by the parsed arguments.

    Args:
        args: Parsed arguments with config and project_root
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required and missing, or invalid
    """
    project_root = resolve_project_root(args.project_root)
    config_file = resolve_config_file(project_root, args.config)

    if not config_file.exists() and not required and not args.config:
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")
    return load_config_data(config_file)


def merge_arguments(config: Dict[str, Any], args) -> Dict[str, Any]:
    """
    Merge command-line arguments with config file.
    CLI args override config file values.

    Args:
        config: Configuration dictionary from file
        args: Parsed command-line arguments

    Returns:
        Merged configuration dictionary
    """
    merged = config.copy()

    if args.inputs:
        merged["inputs"] = list(args.inputs)

    if args.output_dir:
        merged["output_directory"] = args.output_dir

    if args.backend:
        merged["backend"] = args.backend

    if args.executable:
        merged["executable"] = args.executable

    if args.define:
        defines = dict(merged.get("defines") or {})
        for item in args.define:
            name, _, value = item.partition("=")
            if not name:
                raise ConfigurationError(f"Invalid define (expected NAME=VALUE): {item}")
            defines[name] = value
        merged["defines"] = defines

    if args.include:
        merged["include_dirs"] = list(merged.get("include_dirs") or []) + list(
            args.include
        )

    if args.timeout is not None:
        merged["timeout"] = args.timeout

    return merged


# ============================================================================
# Output Formatting
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def print_warning(message: str):
    """Print warning message to stderr."""
    print(f"WARNING: {message}", file=sys.stderr)


# ============================================================================
# Path Utilities
# ============================================================================


def resolve_project_root(path: Optional[Path] = None) -> Path:
    """
    Resolve project root directory.

    Args:
        path: Optional path (defaults to current directory)

    Returns:
        Resolved absolute path
    """
    if path is None:
        path = Path.cwd()
    return Path(path).resolve()
