"""Tests for configuration loading."""

import pytest

from edgeview.config.errors import ConfigError, ConfigLoadError, ConfigValidationError
from edgeview.config.loader import load_config
from edgeview.config.models import EdgeviewConfig, RendererConfig


@pytest.fixture
def write_config(tmp_path):
    def write(content: str):
        path = tmp_path / "edgeview.yaml"
        path.write_text(content)
        return path

    return write


class TestDefaults:
    def test_defaults_without_path(self):
        config = load_config(None)

        assert config == EdgeviewConfig()
        assert config.renderer.command == ["plantuml"]
        assert config.renderer.format == "png"
        assert config.renderer.timeout == 30.0
        assert config.pipeline.max_workers == 2
        assert config.log_level == "WARNING"

    def test_empty_file_gives_defaults(self, write_config):
        assert load_config(write_config("")) == EdgeviewConfig()

    def test_comment_only_file_gives_defaults(self, write_config):
        assert load_config(write_config("# nothing set yet\n")) == EdgeviewConfig()

    def test_partial_file_keeps_other_defaults(self, write_config):
        config = load_config(write_config("renderer:\n  format: svg\n"))

        assert config.renderer.format == "svg"
        assert config.renderer.command == ["plantuml"]
        assert config.pipeline.max_workers == 2


class TestLoadConfig:
    def test_load_full_file(self, write_config):
        path = write_config(
            """
renderer:
  command: [java, -jar, /opt/plantuml.jar]
  timeout: 12.5
pipeline:
  max_workers: 4
log_level: debug
"""
        )

        config = load_config(path)

        assert config.renderer.command == ["java", "-jar", "/opt/plantuml.jar"]
        assert config.renderer.timeout == 12.5
        assert config.pipeline.max_workers == 4
        assert config.log_level == "DEBUG"

    def test_command_string_is_split(self, write_config):
        config = load_config(
            write_config("renderer:\n  command: java -jar 'my plantuml.jar'\n")
        )
        assert config.renderer.command == ["java", "-jar", "my plantuml.jar"]

    def test_command_string_in_model(self):
        assert RendererConfig(command="plantuml -v").command == ["plantuml", "-v"]


class TestLoadErrors:
    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.yaml"

        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(path)

        assert "Cannot read" in str(exc_info.value)
        assert exc_info.value.path == str(path)

    def test_directory(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            load_config(tmp_path)

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(write_config("renderer: [unclosed"))
        assert "not valid YAML" in str(exc_info.value)

    def test_non_mapping(self, write_config):
        with pytest.raises(ConfigLoadError) as exc_info:
            load_config(write_config("- a\n- b\n"))
        assert "must hold a mapping" in str(exc_info.value)

    def test_invalid_values(self, write_config):
        path = write_config(
            """
renderer:
  format: gif
  timeout: 0
pipeline:
  max_workers: 0
"""
        )

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)

        locs = {err["loc"] for err in exc_info.value.errors}
        assert locs == {"renderer.format", "renderer.timeout", "pipeline.max_workers"}
        assert "3 invalid setting(s)" in str(exc_info.value)
        assert exc_info.value.path == str(path)

    def test_errors_share_a_base_class(self):
        assert issubclass(ConfigLoadError, ConfigError)
        assert issubclass(ConfigValidationError, ConfigError)
