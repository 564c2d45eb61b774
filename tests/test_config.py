"""
Tests for Settings and RandomKeyConfig
======================================
"""

import pytest

from randomkey import RandomKeyConfig, RandomKeyPropertySource
from randomkey.settings import APP_CONFIG_PATH, get_setting, load_app_config, use_config


def _write_settings(tmp_path, body):
    path = tmp_path / "app.yaml"
    path.write_text(body)
    return path


class TestSettings:
    """Bundled app.yaml and dotted lookups."""

    def test_bundled_config_exists(self):
        assert APP_CONFIG_PATH.exists()
        assert "random_key" in load_app_config()

    def test_get_setting_dotted(self):
        assert get_setting("random_key.name") == "randomKey"
        assert get_setting("random_key.prefix") == "randomKey."
        assert get_setting("random_key.default_length") == 64

    def test_get_setting_default(self):
        assert get_setting("random_key.missing", "dflt") == "dflt"
        assert get_setting("random_key.name.deeper") is None

    def test_use_config(self, tmp_path):
        path = _write_settings(tmp_path, "random_key:\n  name: alt\n")
        use_config(path)
        assert get_setting("random_key.name") == "alt"
        use_config(None)
        assert get_setting("random_key.name") == "randomKey"

    def test_use_config_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            use_config(tmp_path / "missing.yaml")
        assert get_setting("random_key.name") == "randomKey"

    def test_non_mapping_config(self, tmp_path):
        path = _write_settings(tmp_path, "- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_app_config(path)


class TestRandomKeyConfig:
    """Config dataclass defaults and validation."""

    def test_defaults_from_app_yaml(self):
        config = RandomKeyConfig()
        assert config.name == "randomKey"
        assert config.prefix == "randomKey."
        assert config.default_length == 64
        assert config.alphabet == "reference"
        assert config.seed is None
        assert config.strict is False
        assert config.thread_safe is False

    def test_explicit_values_win(self):
        config = RandomKeyConfig(name="x", default_length=5, strict=True)
        assert config.name == "x"
        assert config.default_length == 5
        assert config.strict is True

    def test_settings_file_values(self, tmp_path):
        path = _write_settings(
            tmp_path,
            "random_key:\n"
            "  name: secrets\n"
            "  prefix: 'secret.'\n"
            "  default_length: 20\n"
            "  alphabet: balanced\n"
            "  seed: 42\n"
            "  thread_safe: true\n",
        )
        use_config(path)
        config = RandomKeyConfig()
        assert config.seed == 42
        assert config.thread_safe is True

        a = RandomKeyPropertySource.from_config(config)
        b = RandomKeyPropertySource.from_config(RandomKeyConfig())
        assert a.name == "secrets"
        first = a.lookup("secret.key")
        assert len(first) == 20
        assert first == b.lookup("secret.key")

    def test_missing_settings(self, tmp_path):
        use_config(_write_settings(tmp_path, "random_key:\n  name: x\n"))
        with pytest.raises(ValueError) as exc:
            RandomKeyConfig()
        assert "prefix" in str(exc.value)
        assert "default_length" in str(exc.value)

    @pytest.mark.parametrize("kwargs", [
        {"default_length": "64"},
        {"default_length": True},
        {"seed": "abc"},
    ])
    def test_invalid_types(self, kwargs):
        with pytest.raises(ValueError):
            RandomKeyConfig(**kwargs)
