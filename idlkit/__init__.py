"""
idlkit - build plugin that drives the omniidl IDL compiler.

The package turns a declarative configuration into omniidl command lines and
runs the compiler once per IDL source, failing the build on the first error.
"""

__version__ = "0.1.0"
