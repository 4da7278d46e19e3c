"""
Entry point for running the idlkit CLI as a module.

Usage: python -m idlkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
