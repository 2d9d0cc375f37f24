"""User configuration loading and validation."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError, validators

from sonosctl.core.errors import ConfigError

CACHE_FILE_ENV = "SONOSCTL_CACHE_FILE"
DEFAULT_DISCOVERY_TIMEOUT_S = 5.0
LOGGER = logging.getLogger(__name__)


class UniqueKeyLoader(yaml.SafeLoader):
    """YAML loader that rejects duplicate mapping keys."""


def _construct_mapping(loader: UniqueKeyLoader, node: yaml.Node, deep: bool = False) -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=deep)
        if key in mapping:
            raise ConfigError(f"Duplicate key '{key}' in YAML document")
        mapping[key] = loader.construct_object(value_node, deep=deep)
    return mapping


UniqueKeyLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,
)


@dataclass(frozen=True)
class Settings:
    cache_file: Path
    discovery_timeout: float = DEFAULT_DISCOVERY_TIMEOUT_S
    interface_addr: str | None = None


def config_path() -> Path:
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "sonosctl/config.yaml"


def default_cache_file() -> Path:
    xdg_cache = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return xdg_cache / "sonosctl/speakers.json"


def _load_schema_validator() -> Any:
    schema_text = resources.files("sonosctl.schemas").joinpath("config.schema.json").read_text(
        encoding="utf-8"
    )
    schema = json.loads(schema_text)
    validator_cls = validators.validator_for(schema)
    validator_cls.check_schema(schema)
    return validator_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc

    try:
        loaded = yaml.load(content, Loader=UniqueKeyLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at root")
    return loaded


def load_settings(path: Path | None = None) -> Settings:
    """Build settings from defaults, the optional YAML file, and the environment.

    A missing config file is not an error; defaults apply. The cache file
    location can always be overridden with ``SONOSCTL_CACHE_FILE``.
    """
    source = path or config_path()
    doc: dict[str, Any] = {}
    if source.is_file():
        doc = _read_yaml(source)
        try:
            _load_schema_validator().validate(doc)
        except ValidationError as exc:
            where = ".".join(str(p) for p in exc.path)
            where = f" ({where})" if where else ""
            raise ConfigError(f"Schema validation failed for {source}{where}: {exc.message}") from exc
        LOGGER.debug("Loaded config from %s", source)

    cache_file = Path(doc["cache_file"]).expanduser() if "cache_file" in doc else default_cache_file()
    env_cache = os.environ.get(CACHE_FILE_ENV)
    if env_cache:
        cache_file = Path(env_cache).expanduser()

    return Settings(
        cache_file=cache_file,
        discovery_timeout=float(doc.get("discovery_timeout", DEFAULT_DISCOVERY_TIMEOUT_S)),
        interface_addr=doc.get("interface_addr"),
    )
