"""
Configuration loading for idlkit.
"""

from idlkit.config.parser import (
    CompilerConfiguration,
    DEFAULT_CONFIG_NAME,
    parse_config,
    parse_config_data,
    load_config_data,
)

__all__ = [
    "CompilerConfiguration",
    "DEFAULT_CONFIG_NAME",
    "parse_config",
    "parse_config_data",
    "load_config_data",
]
