"""
Core building blocks shared by every idlkit module.
"""

from idlkit.core.exceptions import (
    IdlKitError,
    ConfigurationError,
    CompilationError,
    CompilerFailure,
    LaunchFailure,
    InterruptedFailure,
    CompilerTimeoutError,
    PluginError,
)

__all__ = [
    "IdlKitError",
    "ConfigurationError",
    "CompilationError",
    "CompilerFailure",
    "LaunchFailure",
    "InterruptedFailure",
    "CompilerTimeoutError",
    "PluginError",
]
