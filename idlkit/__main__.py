"""
Entry point for running the idlkit CLI as a module.

Usage: python -m idlkit [command] [options]
"""

from idlkit.cli.parser import main

if __name__ == "__main__":
    main()
