"""Unit tests for configuration parser."""

import pytest
from pathlib import Path

from idlkit.config.parser import (
    CompilerConfiguration,
    DEFAULT_OUTPUT_DIRECTORY,
    parse_config,
    parse_config_data,
)
from idlkit.core.exceptions import ConfigurationError


@pytest.mark.unit
def test_parse_basic_config(tmp_path):
    """Test parsing basic configuration."""
    # Arrange
    config_file = tmp_path / "idlkit.yaml"
    config_file.write_text(
        """
inputs:
  - idl
"""
    )

    # Act
    config = parse_config(config_file)

    # Assert
    assert config.inputs == (tmp_path / "idl",)
    assert config.output_directory == tmp_path / DEFAULT_OUTPUT_DIRECTORY
    assert config.preprocess is True
    assert config.preprocessor_command is None
    assert config.preprocessor_arguments == ()
    assert config.defines == {}
    assert config.backend == "cxx"
    assert config.executable == "omniidl"
    assert config.allow_unresolved_forward is False
    assert config.pass_comments_before is False
    assert config.timeout is None
    assert config.sort_sources is False


@pytest.mark.unit
def test_parse_complete_config(tmp_path):
    """Test parsing complete configuration with all fields."""
    # Arrange
    config_file = tmp_path / "idlkit.yaml"
    config_file.write_text(
        """
inputs:
  - idl
  - extra/Echo.idl
output_directory: /tmp/generated
preprocess: false
preprocessor_command: cpp
preprocessor_arguments: [-traditional, -P]
defines:
  ZETA: 1
  ALPHA: value
undefines: [DEBUG]
include_dirs:
  - idl/include
  - /usr/share/idl/omniORB
backend: python
backend_arguments: [package=gen]
backends_path: /opt/omniidl/backends
allow_unresolved_forward: true
allow_case_difference: true
pass_comments_after: true
pass_comments_before: true
executable: /opt/omniORB/bin/omniidl
timeout: 120
sort_sources: true
"""
    )

    # Act
    config = parse_config(config_file)

    # Assert
    assert config.inputs == (tmp_path / "idl", tmp_path / "extra" / "Echo.idl")
    assert config.output_directory == Path("/tmp/generated")
    assert config.preprocess is False
    assert config.preprocessor_command == "cpp"
    assert config.preprocessor_arguments == ("-traditional", "-P")
    assert list(config.defines.items()) == [("ZETA", "1"), ("ALPHA", "value")]
    assert config.undefines == ("DEBUG",)
    assert config.include_dirs == (
        tmp_path / "idl" / "include",
        Path("/usr/share/idl/omniORB"),
    )
    assert config.backend == "python"
    assert config.backend_arguments == ("package=gen",)
    assert config.backends_path == "/opt/omniidl/backends"
    assert config.allow_unresolved_forward is True
    assert config.allow_case_difference is True
    assert config.pass_comments_after is True
    assert config.pass_comments_before is True
    assert config.executable == "/opt/omniORB/bin/omniidl"
    assert config.timeout == 120.0
    assert config.sort_sources is True


@pytest.mark.unit
def test_parse_relative_to_project_root(tmp_path):
    """Test that relative paths resolve against an explicit project root."""
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    config_file = config_dir / "idlkit.yaml"
    config_file.write_text("inputs: [idl]\noutput_directory: gen\n")

    config = parse_config(config_file, project_root=tmp_path)

    assert config.inputs == (tmp_path / "idl",)
    assert config.output_directory == tmp_path / "gen"


@pytest.mark.unit
def test_single_input_scalar(tmp_path):
    """Test that a single input may be given without a list."""
    config = parse_config_data({"inputs": "echo.idl"}, tmp_path)

    assert config.inputs == (tmp_path / "echo.idl",)


@pytest.mark.unit
def test_parse_missing_file():
    """Test parsing non-existent file raises error."""
    # Arrange
    config_file = Path("/nonexistent/idlkit.yaml")

    # Act & Assert
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        parse_config(config_file)


@pytest.mark.unit
def test_parse_empty_file(tmp_path):
    """Test parsing empty file raises error."""
    config_file = tmp_path / "idlkit.yaml"
    config_file.write_text("")

    with pytest.raises(ConfigurationError, match="empty"):
        parse_config(config_file)


@pytest.mark.unit
def test_parse_invalid_yaml(tmp_path):
    """Test parsing invalid YAML raises error."""
    config_file = tmp_path / "idlkit.yaml"
    config_file.write_text("inputs: [idl\n")

    with pytest.raises(ConfigurationError, match="Invalid YAML syntax"):
        parse_config(config_file)


@pytest.mark.unit
def test_parse_non_mapping(tmp_path):
    """Test that a top-level list is rejected."""
    config_file = tmp_path / "idlkit.yaml"
    config_file.write_text("- idl\n")

    with pytest.raises(ConfigurationError, match="mapping"):
        parse_config(config_file)


@pytest.mark.unit
@pytest.mark.parametrize("data", [{}, {"inputs": []}, {"inputs": None}])
def test_missing_inputs(tmp_path, data):
    """Test that inputs are required and non-empty."""
    with pytest.raises(ConfigurationError, match="inputs"):
        parse_config_data(data, tmp_path)


@pytest.mark.unit
def test_unknown_key(tmp_path):
    """Test that misspelled keys are reported."""
    with pytest.raises(ConfigurationError, match="Unknown configuration keys: outputDir"):
        parse_config_data({"inputs": ["idl"], "outputDir": "gen"}, tmp_path)


@pytest.mark.unit
def test_invalid_bool(tmp_path):
    """Test that boolean options reject strings."""
    with pytest.raises(ConfigurationError, match="preprocess must be true or false"):
        parse_config_data({"inputs": ["idl"], "preprocess": "no way"}, tmp_path)


@pytest.mark.unit
def test_invalid_list(tmp_path):
    """Test that list options reject mappings."""
    with pytest.raises(ConfigurationError, match="undefines must be a list"):
        parse_config_data({"inputs": ["idl"], "undefines": {"A": 1}}, tmp_path)


@pytest.mark.unit
def test_invalid_defines(tmp_path):
    """Test that defines must be a mapping of scalars."""
    with pytest.raises(ConfigurationError, match="defines must be a dictionary"):
        parse_config_data({"inputs": ["idl"], "defines": ["A=1"]}, tmp_path)

    with pytest.raises(ConfigurationError, match="defines.A must be a scalar"):
        parse_config_data({"inputs": ["idl"], "defines": {"A": [1]}}, tmp_path)


@pytest.mark.unit
def test_define_values_normalized(tmp_path):
    """Test that YAML booleans and nulls become preprocessor-friendly strings."""
    config = parse_config_data(
        {"inputs": ["idl"], "defines": {"ON": True, "OFF": False, "EMPTY": None}},
        tmp_path,
    )

    assert config.defines == {"ON": "1", "OFF": "0", "EMPTY": ""}


@pytest.mark.unit
def test_defines_read_only(tmp_path):
    """Test that defines cannot be changed after the configuration is built."""
    source = {"A": "1"}
    config = CompilerConfiguration(inputs=(tmp_path,), defines=source)

    with pytest.raises(TypeError):
        config.defines["B"] = "2"

    source["C"] = "3"
    assert dict(config.defines) == {"A": "1"}


@pytest.mark.unit
@pytest.mark.parametrize("timeout", [0, -5, "soon", True])
def test_invalid_timeout(tmp_path, timeout):
    """Test that timeout must be a positive number."""
    with pytest.raises(ConfigurationError, match="timeout"):
        parse_config_data({"inputs": ["idl"], "timeout": timeout}, tmp_path)


@pytest.mark.unit
def test_configuration_requires_inputs():
    """Test that the configuration object itself refuses empty inputs."""
    with pytest.raises(ConfigurationError):
        CompilerConfiguration(inputs=())


@pytest.mark.unit
def test_configuration_is_immutable(tmp_path):
    """Test that a built configuration cannot be modified."""
    config = CompilerConfiguration(inputs=(tmp_path,))

    with pytest.raises(AttributeError):
        config.backend = "python"
