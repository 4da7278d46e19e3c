"""YAML configuration parser for idlkit.

This module provides parsing and validation for idlkit.yaml configuration files.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from idlkit.core.exceptions import ConfigurationError

DEFAULT_CONFIG_NAME = "idlkit.yaml"
DEFAULT_OUTPUT_DIRECTORY = Path("build") / "generated-sources" / "c++"
DEFAULT_EXECUTABLE = "omniidl"
DEFAULT_BACKEND = "cxx"


@dataclass(frozen=True)
class CompilerConfiguration:
    """Options for one run of the IDL compiler over a set of inputs."""

    inputs: Tuple[Path, ...]
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
    preprocess: bool = True
    preprocessor_command: Optional[str] = None
    preprocessor_arguments: Tuple[str, ...] = ()
    defines: Mapping[str, str] = field(default_factory=dict)
    undefines: Tuple[str, ...] = ()
    include_dirs: Tuple[Path, ...] = ()
    backend: str = DEFAULT_BACKEND
    backend_arguments: Tuple[str, ...] = ()
    backends_path: Optional[str] = None
    allow_unresolved_forward: bool = False
    allow_case_difference: bool = False
    pass_comments_after: bool = False
    pass_comments_before: bool = False
    executable: str = DEFAULT_EXECUTABLE
    timeout: Optional[float] = None
    sort_sources: bool = False

    def __post_init__(self):
        if not self.inputs:
            raise ConfigurationError("At least one input must be configured")
        # Read-only view of a private copy
        object.__setattr__(self, "defines", MappingProxyType(dict(self.defines)))


_BOOL_FIELDS = (
    "preprocess",
    "allow_unresolved_forward",
    "allow_case_difference",
    "pass_comments_after",
    "pass_comments_before",
    "sort_sources",
)
_STRING_LIST_FIELDS = ("preprocessor_arguments", "undefines", "backend_arguments")
_OPTIONAL_STRING_FIELDS = ("preprocessor_command", "backends_path")
_KNOWN_FIELDS = frozenset(
    _BOOL_FIELDS
    + _STRING_LIST_FIELDS
    + _OPTIONAL_STRING_FIELDS
    + (
        "inputs",
        "output_directory",
        "defines",
        "include_dirs",
        "backend",
        "executable",
        "timeout",
    )
)


def parse_config(
    config_path: Path, project_root: Optional[Path] = None
) -> CompilerConfiguration:
    """
    Parse idlkit.yaml configuration file.

    Args:
        config_path: Path to idlkit.yaml
        project_root: Directory relative paths are resolved against
            (defaults to the directory holding the file)

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    data = load_config_data(config_path)

    if project_root is None:
        project_root = config_path.parent

    return parse_config_data(data, project_root)


def load_config_data(config_path: Path) -> Dict[str, Any]:
    """
    Load the raw mapping stored in a configuration file.

    Raises:
        ConfigurationError: If the file is missing, empty or not a YAML mapping
    """
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigurationError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must contain a mapping")

    return data


def parse_config_data(
    data: Dict[str, Any], project_root: Path
) -> CompilerConfiguration:
    """
    Build a configuration from an already loaded mapping.

    Args:
        data: Raw configuration values, keyed like idlkit.yaml
        project_root: Directory relative paths are resolved against

    Returns:
        Parsed and validated configuration
    """
    return _parse_and_validate(data, project_root)


def _parse_and_validate(data: Dict[str, Any], project_root: Path) -> CompilerConfiguration:
    """Parse and validate configuration data."""
    unknown = sorted(set(data) - _KNOWN_FIELDS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    if "inputs" not in data or not data["inputs"]:
        raise ConfigurationError("Missing required field: inputs")

    inputs = tuple(
        _resolve(project_root, p) for p in _string_list(data, "inputs")
    )
    include_dirs = tuple(
        _resolve(project_root, p) for p in _string_list(data, "include_dirs")
    )
    output_directory = _resolve(
        project_root, data.get("output_directory") or DEFAULT_OUTPUT_DIRECTORY
    )

    values: Dict[str, Any] = {}
    for name in _BOOL_FIELDS:
        if name in data:
            values[name] = _bool(data, name)
    for name in _STRING_LIST_FIELDS:
        values[name] = tuple(_string_list(data, name))
    for name in _OPTIONAL_STRING_FIELDS:
        values[name] = _optional_string(data, name)

    backend = _optional_string(data, "backend") or DEFAULT_BACKEND
    executable = _optional_string(data, "executable") or DEFAULT_EXECUTABLE

    return CompilerConfiguration(
        inputs=inputs,
        output_directory=output_directory,
        defines=_parse_defines(data.get("defines")),
        include_dirs=include_dirs,
        backend=backend,
        executable=executable,
        timeout=_parse_timeout(data.get("timeout")),
        **values,
    )


def _resolve(project_root: Path, value: Any) -> Path:
    """Resolve a configured path against the project root."""
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = project_root / path
    return path


def _bool(data: Dict[str, Any], name: str) -> bool:
    value = data[name]
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got: {value!r}")
    return value


def _optional_string(data: Dict[str, Any], name: str) -> Optional[str]:
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a string, got: {value!r}")
    return str(value)


def _string_list(data: Dict[str, Any], name: str) -> Tuple[str, ...]:
    """Read a list of scalars; a single scalar is accepted as a one-item list."""
    value = data.get(name)
    if value is None:
        return ()
    if isinstance(value, (str, Path)):
        value = [value]
    if not isinstance(value, list):
        raise ConfigurationError(f"{name} must be a list, got: {value!r}")

    items = []
    for item in value:
        if isinstance(item, (dict, list)) or item is None:
            raise ConfigurationError(f"{name} entries must be strings, got: {item!r}")
        items.append(str(item))
    return tuple(items)


def _parse_defines(value: Any) -> Dict[str, str]:
    """Parse preprocessor symbol definitions, keeping document order."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError("defines must be a dictionary")

    defines = {}
    for name, symbol_value in value.items():
        if symbol_value is None:
            symbol_value = ""
        elif isinstance(symbol_value, bool):
            # YAML turns bare yes/true into booleans; the preprocessor wants 1/0
            symbol_value = int(symbol_value)
        elif isinstance(symbol_value, (dict, list)):
            raise ConfigurationError(
                f"defines.{name} must be a scalar, got: {symbol_value!r}"
            )
        defines[str(name)] = str(symbol_value)
    return defines


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"timeout must be a number of seconds, got: {value!r}")
    if value <= 0:
        raise ConfigurationError(f"timeout must be positive, got: {value}")
    return float(value)
