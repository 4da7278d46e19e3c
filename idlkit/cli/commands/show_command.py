"""
Show-command command implementation.

Prints the omniidl command line for every source without running anything.
"""

import logging

from idlkit.cli.utils import (
    load_command_config,
    merge_arguments,
    print_error,
    resolve_project_root,
)
from idlkit.compiler.arguments import build_arguments, format_command
from idlkit.compiler.invoker import appended_source
from idlkit.compiler.sources import enumerate_sources
from idlkit.core.exceptions import IdlKitError
from idlkit.plugins.context import PluginContext

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the show-command command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    project_root = resolve_project_root(args.project_root)

    try:
        config = merge_arguments(
            load_command_config(args, required=not args.inputs), args
        )
        configuration = PluginContext(project_root, config).compiler_configuration()
        arguments = build_arguments(configuration, create_output_directory=False)

        for source in enumerate_sources(
            configuration.inputs, sort=configuration.sort_sources
        ):
            with appended_source(arguments, str(source)):
                print(format_command(arguments))
    except IdlKitError as e:
        print_error("Cannot build IDL compiler command", str(e))
        return 1

    return 0
