"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from placeholder_mapper.config import MapperConfig, load_authority_mapping, load_config
from placeholder_mapper.errors import ConfigError

_ENV_KEYS = (
    "MAPPER_DOCSTORE_ADDRESS",
    "MAPPER_DOCSTORE_TIMEOUT",
    "MAPPER_AUTHORITY_MAPPING_FILE",
    "MAPPER_API_KEY",
    "MAPPER_HOST",
    "MAPPER_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_ini(tmp_path, text: str):
    path = tmp_path / "placeholder-mapper.ini"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path / "missing.ini")
        assert config == MapperConfig()
        assert config.authority_mapping == {}

    def test_reads_ini(self, tmp_path):
        path = _write_ini(
            tmp_path,
            "[docstore]\n"
            "address = http://docstore:8080\n"
            "timeout = 2.5\n"
            "[gateway]\n"
            "api_key = s3cret\n"
            "port = 9090\n"
            "[authorities]\n"
            "FTAlphaville.ft.com = FT-LABS-WP-1-24\n",
        )
        config = load_config(path)
        assert config.docstore_address == "http://docstore:8080"
        assert config.docstore_timeout == 2.5
        assert config.api_key == "s3cret"
        assert config.port == 9090
        assert config.host == "127.0.0.1"
        assert config.authority_mapping == {"FTAlphaville.ft.com": "FT-LABS-WP-1-24"}

    def test_env_overrides_ini(self, tmp_path, monkeypatch):
        path = _write_ini(tmp_path, "[docstore]\naddress = http://from-ini\n")
        monkeypatch.setenv("MAPPER_DOCSTORE_ADDRESS", "http://from-env")
        monkeypatch.setenv("MAPPER_PORT", "7000")
        monkeypatch.setenv("MAPPER_DOCSTORE_TIMEOUT", "1")
        config = load_config(path)
        assert config.docstore_address == "http://from-env"
        assert config.port == 7000
        assert config.docstore_timeout == 1.0

    def test_mapping_file_merges_over_ini(self, tmp_path):
        (tmp_path / "authorities.json").write_text(
            json.dumps({"blogs.ft.com": "FT-LABS-WP-1-2", "a.ft.com": "NEW"}),
            encoding="utf-8",
        )
        path = _write_ini(
            tmp_path,
            "[docstore]\nauthority_mapping_file = authorities.json\n"
            "[authorities]\na.ft.com = OLD\nb.ft.com = KEPT\n",
        )
        config = load_config(path)
        assert config.authority_mapping == {
            "a.ft.com": "NEW",
            "b.ft.com": "KEPT",
            "blogs.ft.com": "FT-LABS-WP-1-2",
        }

    def test_mapping_file_from_env(self, tmp_path, monkeypatch):
        mapping = tmp_path / "m.json"
        mapping.write_text(json.dumps({"ftalphaville.ft.com": "FT-LABS-WP-1-24"}), encoding="utf-8")
        monkeypatch.setenv("MAPPER_AUTHORITY_MAPPING_FILE", str(mapping))
        config = load_config(tmp_path / "missing.ini")
        assert config.authority_mapping == {"ftalphaville.ft.com": "FT-LABS-WP-1-24"}

    def test_authority_mapping_is_read_only(self):
        source = {"ftalphaville.ft.com": "FT-LABS-WP-1-24"}
        config = MapperConfig(authority_mapping=source)
        source["blogs.ft.com"] = "FT-LABS-WP-1-2"
        assert dict(config.authority_mapping) == {"ftalphaville.ft.com": "FT-LABS-WP-1-24"}
        with pytest.raises(TypeError):
            config.authority_mapping["blogs.ft.com"] = "FT-LABS-WP-1-2"
        assert hash(config) == hash(MapperConfig(authority_mapping=source))


class TestLoadAuthorityMapping:
    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_authority_mapping(path)

    def test_rejects_non_string_values(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"a.ft.com": 3}', encoding="utf-8")
        with pytest.raises(ConfigError):
            load_authority_mapping(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_authority_mapping(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_authority_mapping(path)
