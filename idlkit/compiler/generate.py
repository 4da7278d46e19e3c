"""
Source generation driver.

Builds the base command line once, then compiles every source the configured
inputs expand to, one after another. The first failure propagates and no
further sources are compiled; files generated by earlier runs stay in place.
"""

import logging
from typing import List, Optional

from idlkit.compiler.arguments import build_arguments, format_command
from idlkit.compiler.invoker import CompilationOutcome, CompilerInvoker
from idlkit.compiler.sources import enumerate_sources
from idlkit.config.parser import CompilerConfiguration

logger = logging.getLogger(__name__)


def generate(
    config: CompilerConfiguration,
    invoker: Optional[CompilerInvoker] = None,
    log: Optional[logging.Logger] = None,
) -> List[CompilationOutcome]:
    """
    Run the IDL compiler over all configured inputs.

    Args:
        config: Compiler configuration
        invoker: Invoker to use (defaults to one honouring config.timeout)
        log: Logger receiving progress messages (defaults to this module's);
            also handed to the default invoker

    Returns:
        Outcomes of every compiler run, in compilation order

    Raises:
        ConfigurationError: An input is neither a file nor a directory
        CompilationError: A compiler run failed
    """
    log = log or logger
    if invoker is None:
        invoker = CompilerInvoker(timeout=config.timeout, log=log)

    arguments = build_arguments(config)
    log.debug(f"Base command: {format_command(arguments)}")

    outcomes = []
    for source in enumerate_sources(config.inputs, sort=config.sort_sources):
        outcomes.append(invoker.invoke(arguments, source))

    log.info(f"Compiled {len(outcomes)} IDL source(s) into {config.output_directory}")
    return outcomes
