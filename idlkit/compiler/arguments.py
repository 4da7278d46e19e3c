"""
omniidl command-line assembly.

Maps a CompilerConfiguration onto the option tokens omniidl understands. The
result is the base command line: every option, but no source path. Options
are emitted in a fixed order so that logged command lines are stable from
one build to the next.
"""

import logging
import shlex
from pathlib import Path
from typing import List, Sequence

from idlkit.config.parser import CompilerConfiguration

logger = logging.getLogger(__name__)


def build_arguments(
    config: CompilerConfiguration, create_output_directory: bool = True
) -> List[str]:
    """
    Build the base omniidl command line for a configuration.

    Also makes sure the output directory exists, since omniidl will not
    create it.

    Args:
        config: Compiler configuration
        create_output_directory: Create the output directory (disable when
            the command line is only displayed)

    Returns:
        Command line starting with the executable, without any source path

    Example:
        >>> config = CompilerConfiguration(inputs=(Path("echo.idl"),))
        >>> build_arguments(config)[:2]
        ['omniidl', '-bcxx']
    """
    arguments = [config.executable, f"-b{config.backend}"]

    if not config.preprocess:
        arguments.append("-N")

    if config.preprocessor_command:
        arguments.append(f"-Y{config.preprocessor_command}")

    if config.preprocessor_arguments:
        arguments.append(_joined_option("-Wp", config.preprocessor_arguments))

    for name, value in config.defines.items():
        arguments.append(f"-D{name}={value}")

    for name in config.undefines:
        arguments.append(f"-U{name}")

    for include_dir in config.include_dirs:
        arguments.append(f"-I{include_dir}")

    if config.backend_arguments:
        arguments.append(_joined_option("-Wb", config.backend_arguments))

    if config.backends_path is not None:
        arguments.append(f"-p{config.backends_path}")

    if config.allow_unresolved_forward:
        arguments.append("-nf")

    if config.allow_case_difference:
        arguments.append("-nc")

    if config.pass_comments_after:
        arguments.append("-k")

    if config.pass_comments_before:
        arguments.append("-K")

    arguments.append(f"-C{config.output_directory}")
    if create_output_directory:
        ensure_output_directory(config.output_directory)

    return arguments


def ensure_output_directory(output_directory: Path) -> bool:
    """
    Create the output directory and any missing parents.

    Failure is not fatal here: omniidl reports an unusable output directory
    itself when it runs.

    Returns:
        True if the directory exists afterwards
    """
    try:
        output_directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create output directory {output_directory}: {e}")
        return False

    logger.debug(f"Ensured output directory exists: {output_directory}")
    return True


def format_command(arguments: Sequence[str]) -> str:
    """Render a command line as a shell-quoted string for display."""
    return shlex.join(str(arg) for arg in arguments)


def _joined_option(flag: str, values: Sequence[str]) -> str:
    # omniidl splits pass-through arguments on commas
    return flag + ",".join(values)
