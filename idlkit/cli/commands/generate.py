"""
Generate command implementation.

Runs the generate plugin over the configured IDL inputs.
"""

import logging

from idlkit.cli.utils import (
    load_command_config,
    merge_arguments,
    print_error,
    print_warning,
    resolve_project_root,
)
from idlkit.core.exceptions import IdlKitError
from idlkit.plugins.context import PluginContext
from idlkit.plugins.generate import GeneratePlugin

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the generate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    logger.debug(f"Arguments: {args}")
    project_root = resolve_project_root(args.project_root)
    plugin = GeneratePlugin()

    try:
        config = merge_arguments(
            load_command_config(args, required=not args.inputs), args
        )
        plugin.initialize(PluginContext(project_root, config))

        if not plugin.validate():
            print_warning(
                f"IDL compiler '{plugin.configuration.executable}' not found in PATH"
            )

        outcomes = plugin.execute()
    except IdlKitError as e:
        print_error("IDL source generation failed", str(e))
        return 1
    finally:
        plugin.cleanup()

    print(
        f"Compiled {len(outcomes)} IDL source(s) into "
        f"{plugin.configuration.output_directory}"
    )
    return 0
