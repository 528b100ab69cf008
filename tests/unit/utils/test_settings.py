"""
Tests for archive_browser.utils.settings
"""

import json
from unittest.mock import patch

import pytest

from archive_browser.core.models import FileFilter, ListMode
from archive_browser.utils import settings as settings_module
from archive_browser.utils.settings import Settings, get_settings, save_settings


@pytest.fixture
def config_file(tmp_path):
    config_dir = tmp_path / "config"
    config_file = config_dir / "settings.json"
    with (
        patch.object(settings_module, "CONFIG_DIR", str(config_dir)),
        patch.object(settings_module, "CONFIG_FILE", str(config_file)),
    ):
        yield config_file


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 9042
        assert settings.default_filter() == FileFilter()

    def test_save_and_load(self, config_file):
        Settings(api_port=9100, default_mode="flat", default_max_size="500").save()
        loaded = Settings.load()
        assert loaded.api_port == 9100
        assert loaded.default_filter() == FileFilter(mode=ListMode.FLAT, max_size="500")

    def test_missing_file_gives_defaults(self, config_file):
        assert Settings.load() == Settings()

    def test_unknown_keys_ignored(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(json.dumps({"api_port": 9200, "theme": "dark"}))
        assert Settings.load().api_port == 9200

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_unreadable_file_gives_defaults(self, config_file, content):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(content)
        assert Settings.load() == Settings()

    def test_invalid_default_mode_falls_back_to_tree(self):
        assert Settings(default_mode="sideways").default_filter().mode is ListMode.TREE


class TestGlobalSettings:
    def test_get_settings_is_cached_and_saved(self, config_file):
        with patch.object(settings_module, "_settings", None):
            first = get_settings()
            assert get_settings() is first
            first.api_port = 9300
            save_settings()
        assert json.loads(config_file.read_text())["api_port"] == 9300
