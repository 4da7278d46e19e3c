"""
Plugin generating sources from IDL with omniidl.
"""

import shutil
from typing import Any, Dict, List, Optional

from idlkit import __version__
from idlkit.compiler.generate import generate
from idlkit.compiler.invoker import CompilationOutcome, CompilerInvoker
from idlkit.config.parser import CompilerConfiguration
from idlkit.core.exceptions import IdlKitError, PluginError
from idlkit.plugins import Plugin
from idlkit.plugins.context import PluginContext


class GeneratePlugin(Plugin):
    """
    Generate sources from IDL.

    Runs omniidl once per IDL source named by the configured inputs. The
    first failing source fails the build step.
    """

    goal = "generate"
    default_phase = "generate-sources"

    def __init__(self, invoker: Optional[CompilerInvoker] = None):
        """
        Initialize plugin.

        Args:
            invoker: Invoker to run the compiler with (defaults to one built
                from the configuration)
        """
        self._invoker = invoker
        self._context: Optional[PluginContext] = None
        self._configuration: Optional[CompilerConfiguration] = None

    def metadata(self) -> Dict[str, Any]:
        return {
            "name": "omniidl-generate",
            "version": __version__,
            "description": "Generate sources from IDL with omniidl",
        }

    def initialize(self, context: PluginContext) -> None:
        self._context = context
        self._configuration = context.compiler_configuration()
        context.log(
            "debug",
            f"{self.goal}: {len(self._configuration.inputs)} input(s), "
            f"backend {self._configuration.backend}",
        )

    @property
    def configuration(self) -> CompilerConfiguration:
        """Parsed configuration; only available after initialize()."""
        if self._configuration is None:
            raise PluginError(f"Plugin '{self.goal}' has not been initialized")
        return self._configuration

    def execute(self) -> List[CompilationOutcome]:
        configuration = self.configuration
        sink = self._context.logger
        invoker = self._invoker or CompilerInvoker(
            timeout=configuration.timeout, log=sink
        )

        try:
            return generate(configuration, invoker, log=sink)
        except IdlKitError as e:
            self._context.log("error", str(e))
            raise

    def validate(self) -> bool:
        """Check the configured compiler executable can be found."""
        return shutil.which(self.configuration.executable) is not None
