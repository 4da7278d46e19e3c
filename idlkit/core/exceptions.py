"""
Centralized exception hierarchy for idlkit.

Every error the build step can report derives from IdlKitError, so a host
only has to catch one type to turn a failure into a failed build.
"""

from pathlib import Path
from typing import Optional, Union


# ============================================================================
# Base Exceptions
# ============================================================================


class IdlKitError(Exception):
    """Base exception for all idlkit errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(IdlKitError):
    """
    Raised when the build configuration cannot be used.

    Covers both invalid configuration file content and input paths that are
    neither an existing file nor an existing directory. In the latter case
    ``path`` names the offending input.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)

    @classmethod
    def bad_input(cls, path: Union[str, Path]) -> "ConfigurationError":
        """Build the error reported for an input that is not a file or directory."""
        return cls(f"{path} is not a file or directory", path=path)


# ============================================================================
# Compilation Exceptions
# ============================================================================


class CompilationError(IdlKitError):
    """Base exception for failures while running the IDL compiler."""

    def __init__(self, message: str, source: Optional[Union[str, Path]] = None):
        self.source = source
        super().__init__(message)


class CompilerFailure(CompilationError):
    """Raised when the compiler exits with a positive status."""

    def __init__(
        self,
        returncode: int,
        output: str,
        source: Optional[Union[str, Path]] = None,
    ):
        self.returncode = returncode
        self.output = output
        super().__init__(f"IDL compiler returned {returncode}:  {output}", source)


class LaunchFailure(CompilationError):
    """Raised when the compiler process cannot be started."""

    def __init__(self, reason: str, source: Optional[Union[str, Path]] = None):
        self.reason = reason
        super().__init__(f"Error running IDL compiler:  {reason}", source)


class InterruptedFailure(CompilationError):
    """Raised when waiting for the compiler is interrupted."""

    def __init__(self, source: Optional[Union[str, Path]] = None):
        super().__init__("Subprocess interrupted", source)


class CompilerTimeoutError(CompilationError):
    """Raised when the compiler runs longer than the configured timeout."""

    def __init__(
        self,
        timeout: float,
        output: str = "",
        source: Optional[Union[str, Path]] = None,
    ):
        self.timeout = timeout
        self.output = output
        message = f"IDL compiler timed out after {timeout} seconds"
        if output:
            message += f":  {output}"
        super().__init__(message, source)


# ============================================================================
# Plugin Exceptions
# ============================================================================


class PluginError(IdlKitError):
    """Base exception for plugin-related errors."""

    pass
