"""
Tests for configuration management.

Tests the Config class and configuration loading from files and environment variables.
"""

from pathlib import Path

import pytest

from backlog.config import DEFAULT_FILE_NAME, DEFAULT_TODO_DIR, Config


@pytest.fixture
def write_config(tmp_path):
    """Write an INI file and return its path."""
    def _write(content: str) -> Path:
        path = tmp_path / "config.ini"
        path.write_text(content)
        return path
    return _write


class TestConfig:
    """Tests for Config class."""

    def test_default_config_path(self, home_dir):
        """Test default config path is ~/.backlog/config.ini."""
        config = Config()
        assert config.config_path == home_dir / ".backlog" / "config.ini"

    def test_custom_config_path(self, tmp_path):
        """Test custom config path is used."""
        custom_path = tmp_path / "custom.ini"
        config = Config(custom_path)
        assert config.config_path == custom_path

    def test_missing_config_file_uses_defaults(self, tmp_path, home_dir):
        """Test that missing config file falls back to defaults."""
        config = Config(tmp_path / "nonexistent.ini")
        storage = config.get_storage_config()

        assert storage['todo_dir'] == DEFAULT_TODO_DIR == ".todo"
        assert storage['file_name'] == DEFAULT_FILE_NAME == "backlog.json"
        assert storage['global_dir'] == home_dir / ".backlog"
        assert config.get_display_config() == {'hide_completed': False}

    def test_config_file_parsing(self, write_config, tmp_path):
        """Test parsing valid config file."""
        path = write_config(f"""
[storage]
todo_dir = .tasks
file_name = items.json
global_dir = {tmp_path / "state"}

[display]
hide_completed = yes
""")
        config = Config(path)
        storage = config.get_storage_config()

        assert storage['todo_dir'] == ".tasks"
        assert storage['file_name'] == "items.json"
        assert storage['global_dir'] == tmp_path / "state"
        assert config.get_display_config()['hide_completed'] is True

    def test_global_dir_expands_user(self, write_config, home_dir):
        path = write_config("""
[storage]
global_dir = ~/elsewhere
""")
        assert Config(path).get_storage_config()['global_dir'] == home_dir / "elsewhere"

    def test_environment_variable_override(self, write_config, tmp_path, monkeypatch):
        """Test environment variables override config file."""
        path = write_config("""
[storage]
todo_dir = .tasks
file_name = items.json

[display]
hide_completed = false
""")
        monkeypatch.setenv('BACKLOG_TODO_DIR', '.env-todo')
        monkeypatch.setenv('BACKLOG_FILE_NAME', 'env.json')
        monkeypatch.setenv('BACKLOG_GLOBAL_DIR', str(tmp_path / "env-global"))
        monkeypatch.setenv('BACKLOG_HIDE_COMPLETED', 'TRUE')

        config = Config(path)
        storage = config.get_storage_config()

        assert storage['todo_dir'] == '.env-todo'
        assert storage['file_name'] == 'env.json'
        assert storage['global_dir'] == tmp_path / "env-global"
        assert config.get_display_config()['hide_completed'] is True

    def test_hide_completed_env_false_overrides_file(self, write_config, monkeypatch):
        path = write_config("""
[display]
hide_completed = true
""")
        monkeypatch.setenv('BACKLOG_HIDE_COMPLETED', 'false')
        assert Config(path).get_display_config()['hide_completed'] is False

    def test_partial_config_file(self, write_config):
        """Test config file with only some values uses defaults for missing."""
        path = write_config("""
[storage]
todo_dir = .tasks
""")
        storage = Config(path).get_storage_config()

        assert storage['todo_dir'] == ".tasks"
        assert storage['file_name'] == DEFAULT_FILE_NAME

    def test_malformed_config_file_uses_defaults(self, write_config):
        """Test that an unparsable file is ignored."""
        path = write_config("this is not [an ini file\n= at all")
        config = Config(path)

        assert config.get_storage_config()['todo_dir'] == DEFAULT_TODO_DIR
