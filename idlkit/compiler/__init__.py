"""
IDL compiler invocation.

This package turns a CompilerConfiguration into omniidl runs:
- arguments: base command line assembly
- sources: expansion of inputs into source files
- invoker: one subprocess run per source
- generate: the driver tying them together
"""

from idlkit.compiler.arguments import build_arguments, format_command
from idlkit.compiler.sources import enumerate_sources
from idlkit.compiler.invoker import CompilationOutcome, CompilerInvoker

__all__ = [
    "build_arguments",
    "format_command",
    "enumerate_sources",
    "CompilationOutcome",
    "CompilerInvoker",
]
