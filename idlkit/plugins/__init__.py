"""
idlkit plugin layer.

A host build tool drives idlkit through plugins: it creates a PluginContext
holding the project root and the raw configuration, initializes the plugin
with it, and calls execute() once for the build phase the plugin is bound to.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from idlkit.core.exceptions import PluginError


# Base Plugin Interface
class Plugin(ABC):
    """
    Base class for all idlkit plugins.

    Lifecycle:
        1. Plugin created by the host
        2. Plugin initialized (initialize() called with context)
        3. Plugin executed (execute() called once per build phase run)
        4. Plugin cleaned up (cleanup() called on shutdown)
    """

    #: Name the host uses to request this plugin's work
    goal: str = ""

    #: Build phase the goal runs in unless the host binds it elsewhere
    default_phase: str = ""

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """
        Return plugin metadata.

        Returns:
            Dict with required keys:
            - name: str - Unique plugin identifier (e.g., "omniidl-generate")
            - version: str - Semantic version (e.g., "1.0.0")
            - description: str - Short description of plugin functionality
        """
        pass

    @abstractmethod
    def initialize(self, context: Any) -> None:
        """
        Initialize plugin with provided context.

        Called once before execute(). Configuration problems should be
        reported here rather than during execution.

        Args:
            context: PluginContext with project root and configuration

        Raises:
            ConfigurationError: If the configuration cannot be used
        """
        pass

    @abstractmethod
    def execute(self) -> Any:
        """
        Perform the plugin's work for one build.

        Raises:
            IdlKitError: If the build step fails
        """
        pass

    def cleanup(self) -> None:
        """
        Called when plugin is unloaded (optional).

        Default implementation does nothing.
        """
        pass

    def validate(self) -> bool:
        """
        Validate plugin can function in current environment (optional).

        Returns:
            True if plugin can function, False otherwise

        Default implementation returns True (assume valid).
        """
        return True


# Export public API
from idlkit.plugins.context import PluginContext  # noqa: E402
from idlkit.plugins.generate import GeneratePlugin  # noqa: E402

__all__ = [
    "Plugin",
    "PluginContext",
    "GeneratePlugin",
    "PluginError",
]
