"""Configuration for the placeholder mapper.

Reads from config/placeholder-mapper.ini if present, environment variables
override. The authority mapping comes from the INI [authorities] section,
merged with an optional JSON mapping file.
"""

from __future__ import annotations

import configparser
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from placeholder_mapper.errors import ConfigError

_CONFIG_FILE = (
    Path(__file__).resolve().parent.parent.parent / "config" / "placeholder-mapper.ini"
)


@dataclass(frozen=True)
class MapperConfig:
    """Service configuration. Immutable once loaded."""

    docstore_address: str = "http://localhost:8080/__document-store-api"
    docstore_timeout: float = 10.0
    authority_mapping: Mapping[str, str] = field(default_factory=dict, hash=False)
    api_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "authority_mapping", MappingProxyType(dict(self.authority_mapping))
        )


def load_authority_mapping(path: Path) -> dict[str, str]:
    """Read a JSON object of hostname -> authority."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigError(f"cannot read authority mapping {path}: {exc}") from exc
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ConfigError(
            f"authority mapping {path} must be a JSON object of strings"
        )
    return data


def load_config(config_path: Path | None = None) -> MapperConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}
    authorities: dict[str, str] = {}
    mapping_file: str | None = None

    if path.exists():
        parser = configparser.ConfigParser()
        # hostnames are matched exactly, keep their case
        parser.optionxform = str
        parser.read(path)
        if parser.has_section("docstore"):
            val = parser.get("docstore", "address", fallback=None)
            if val is not None:
                kwargs["docstore_address"] = val
            timeout_str = parser.get("docstore", "timeout", fallback=None)
            if timeout_str is not None:
                kwargs["docstore_timeout"] = float(timeout_str)
            mapping_file = parser.get("docstore", "authority_mapping_file", fallback=None)
        if parser.has_section("gateway"):
            for ini_key, config_key in [
                ("api_key", "api_key"),
                ("host", "host"),
            ]:
                val = parser.get("gateway", ini_key, fallback=None)
                if val is not None:
                    kwargs[config_key] = val
            port_str = parser.get("gateway", "port", fallback=None)
            if port_str is not None:
                kwargs["port"] = int(port_str)
        if parser.has_section("authorities"):
            authorities.update(parser.items("authorities"))

    env_map = {
        "MAPPER_DOCSTORE_ADDRESS": "docstore_address",
        "MAPPER_DOCSTORE_TIMEOUT": "docstore_timeout",
        "MAPPER_API_KEY": "api_key",
        "MAPPER_HOST": "host",
        "MAPPER_PORT": "port",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            if config_key == "port":
                kwargs[config_key] = int(val)
            elif config_key == "docstore_timeout":
                kwargs[config_key] = float(val)
            else:
                kwargs[config_key] = val

    mapping_file = os.getenv("MAPPER_AUTHORITY_MAPPING_FILE", mapping_file)
    if mapping_file:
        mapping_path = Path(mapping_file)
        if not mapping_path.is_absolute():
            mapping_path = path.parent / mapping_path
        authorities.update(load_authority_mapping(mapping_path))

    kwargs["authority_mapping"] = authorities
    return MapperConfig(**kwargs)
