"""Tests pour le chargement des réglages (TOML/JSON, Pydantic)."""

import json

import pytest
from pydantic import BaseModel

from ordered_ini.config import FileConfigLoader, IniSettings, load_settings
from ordered_ini.errors.exceptions import FileConfigurationError


class SampleConfig(BaseModel):
    """Modèle Pydantic de test."""
    name: str
    count: int


@pytest.fixture
def loader():
    return FileConfigLoader()


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def test_load_toml(self, loader, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text('name = "test"\ncount = 3\n')
        assert loader.load(path) == {"name": "test", "count": 3}

    def test_load_json(self, loader, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"name": "test", "count": 3}))
        assert loader.load(str(path)) == {"name": "test", "count": 3}

    def test_load_with_schema(self, loader, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"name": "test", "count": 3}))
        result = loader.load(path, schema=SampleConfig)
        assert isinstance(result, SampleConfig)
        assert result.count == 3

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileConfigurationError, match="non trouvé"):
            loader.load(tmp_path / "absent.toml")

    def test_unsupported_extension(self, loader, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("name: test")
        with pytest.raises(FileConfigurationError, match="Extension non supportée"):
            loader.load(path)

    def test_invalid_toml(self, loader, tmp_path):
        path = tmp_path / "c.toml"
        path.write_text("name = \n")
        with pytest.raises(FileConfigurationError, match="invalide"):
            loader.load(path)

    def test_invalid_data_for_schema(self, loader, tmp_path):
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"name": "test", "count": "beaucoup"}))
        with pytest.raises(FileConfigurationError, match="Configuration invalide"):
            loader.load(path, schema=SampleConfig)

    def test_schema_must_be_base_model(self, loader, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{}")
        with pytest.raises(TypeError):
            loader.load(path, schema=dict)


class TestIniSettings:
    """Tests pour IniSettings et load_settings."""

    def test_defaults(self):
        settings = IniSettings()
        assert settings.encoding == "utf-8"
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.console_output is False

    def test_level_normalized(self):
        assert IniSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            IniSettings(log_level="bavard")

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValueError):
            IniSettings(encoding="pas-un-encodage")

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            IniSettings(inconnu=1)

    def test_load_settings_without_path(self):
        assert load_settings() == IniSettings()

    def test_load_settings_from_toml(self, tmp_path):
        path = tmp_path / "settings.toml"
        path.write_text('encoding = "latin-1"\nlog_level = "warning"\n')
        settings = load_settings(path)
        assert settings.encoding == "latin-1"
        assert settings.log_level == "WARNING"

    def test_load_settings_invalid(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"log_level": "bavard"}))
        with pytest.raises(FileConfigurationError):
            load_settings(path)
