"""
CLI command implementations.

Each module exposes run(args) -> int and is loaded on demand by the parser.
"""
