"""
Plugin context for providing build information to plugins.

This module implements the PluginContext class that a host hands to plugins
during initialization, including:
- Project root directory
- Raw configuration values
- A logging sink for plugin messages
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from idlkit.config.parser import CompilerConfiguration, parse_config_data

logger = logging.getLogger(__name__)


class PluginContext:
    """
    Context provided to plugins during initialization.

    Example:
        ```python
        context = PluginContext(Path("."), {"inputs": ["idl"]})
        plugin = GeneratePlugin()
        plugin.initialize(context)
        plugin.execute()
        ```
    """

    def __init__(
        self,
        project_root: Path,
        config: Dict[str, Any],
        log: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize plugin context.

        Args:
            project_root: Directory relative configuration paths refer to
            config: Configuration dictionary, keyed like idlkit.yaml
            log: Logger receiving plugin messages (defaults to this module's)
        """
        self._project_root = project_root
        self._config = config
        self._logger = log or logger

    # Properties

    @property
    def project_root(self) -> Path:
        """Get project root directory."""
        return self._project_root

    @property
    def config(self) -> Dict[str, Any]:
        """
        Get raw configuration.

        Returns:
            Configuration dictionary as supplied by the host.
        """
        return self._config

    @property
    def logger(self) -> logging.Logger:
        """Get the host's logging sink."""
        return self._logger

    # Helper Methods

    def compiler_configuration(self) -> CompilerConfiguration:
        """
        Parse the raw configuration into a CompilerConfiguration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        return parse_config_data(self._config, self._project_root)

    def log(self, level: str, message: str) -> None:
        """
        Log a message through the host's logging sink.

        Args:
            level: Log level ('debug', 'info', 'warning', 'error')
            message: Log message

        Example:
            context.log('info', 'Generated sources are up to date')
            context.log('error', 'IDL compiler returned 1')
        """
        level = level.lower()
        formatted = f"[{level.upper()}] {message}"
        if level == "debug":
            self._logger.debug(message)
        elif level == "info":
            self._logger.info(message)
        elif level == "warning":
            self._logger.warning(message)
        elif level == "error":
            self._logger.error(message)
        else:
            self._logger.info(formatted)
