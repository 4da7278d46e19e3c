"""
Running omniidl on one source at a time.

The invoker borrows the caller's base command line, appends the source path
for the duration of one run, and always removes it again before returning or
raising. Standard error is merged into standard output and drained while the
process runs, so a chatty compiler cannot fill the pipe and stall the build.
"""

import logging
import signal
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from idlkit.core.exceptions import (
    CompilerFailure,
    CompilerTimeoutError,
    InterruptedFailure,
    LaunchFailure,
)

logger = logging.getLogger(__name__)


@dataclass
class CompilationOutcome:
    """Result of one accepted compiler run."""

    source: Path
    command: List[str]
    returncode: int
    output: str

    @property
    def succeeded(self) -> bool:
        # Signal terminations (negative codes) are accepted, see CompilerInvoker
        return self.returncode <= 0


@contextmanager
def appended_source(arguments: List[str], source: str) -> Iterator[List[str]]:
    """
    Temporarily append a source path to a command line.

    The path is removed on exit, whether the body returned or raised, so the
    list is back at its previous length afterwards.
    """
    arguments.append(source)
    try:
        yield arguments
    finally:
        arguments.pop()


class CompilerInvoker:
    """
    Runs the IDL compiler for individual sources.

    Exit status 0 is success. A positive status fails the build. A negative
    status (the process was killed by a signal) is accepted like success but
    logged as a warning.

    Example:
        >>> invoker = CompilerInvoker()
        >>> outcome = invoker.invoke(["omniidl", "-bcxx", "-Cbuild"], Path("echo.idl"))
        >>> outcome.returncode
        0
    """

    def __init__(
        self, timeout: Optional[float] = None, log: Optional[logging.Logger] = None
    ):
        """
        Initialize invoker.

        Args:
            timeout: Seconds to wait for each run, or None to wait forever
            log: Logger receiving progress and compiler output (defaults to
                this module's)
        """
        self.timeout = timeout
        self._logger = log or logger

    def invoke(
        self, arguments: List[str], source: Union[str, Path]
    ) -> CompilationOutcome:
        """
        Compile one source.

        Args:
            arguments: Base command line; restored to its previous contents
                before this method returns or raises
            source: IDL source to compile

        Returns:
            CompilationOutcome of the run

        Raises:
            CompilerFailure: Compiler exited with a positive status
            LaunchFailure: Compiler could not be started
            InterruptedFailure: Wait for the compiler was interrupted
            CompilerTimeoutError: Compiler ran past the configured timeout
        """
        path = str(source)

        with appended_source(arguments, path):
            self._logger.info(f"Compiling {path}")
            command = list(arguments)
            returncode, output = self._run(command, path)

        if returncode > 0:
            raise CompilerFailure(returncode, output, path)

        if returncode < 0:
            self._logger.warning(
                f"IDL compiler was terminated by {_signal_name(-returncode)} "
                f"while compiling {path}"
            )

        if output:
            self._logger.info(output)

        return CompilationOutcome(
            source=Path(path), command=command, returncode=returncode, output=output
        )

    def _run(self, command: List[str], source: str) -> Tuple[int, str]:
        """Start the compiler and collect its merged output."""
        self._logger.debug(f"Running: {command}")

        try:
            process = subprocess.Popen(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as e:
            self._logger.error(f"Failed to start {command[0]}: {e}")
            raise LaunchFailure(str(e), source) from e

        # The drain after a timeout kill can be interrupted too
        try:
            try:
                output, _ = process.communicate(timeout=self.timeout)
            except subprocess.TimeoutExpired:
                process.kill()
                output, _ = process.communicate()
                raise CompilerTimeoutError(self.timeout, output or "", source)
        except KeyboardInterrupt as e:
            process.kill()
            process.wait()
            raise InterruptedFailure(source) from e

        return process.returncode, output or ""


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"signal {signum}"
