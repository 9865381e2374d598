# infrastructure/config/loader.py
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ConfigurationError
from infrastructure.config.protocol_config import ProtocolConfig


class ConfigLoadError(ConfigurationError):
    pass


class ConfigFileLoader(ABC):
    def load(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigLoadError(f"Config file not found: {path}")

        try:
            data = self._load_file(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Config file is unreadable: {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file is invalid: {path}")
        return data

    @abstractmethod
    def _load_file(self, path: Path) -> Any: ...


class YamlConfigLoader(ConfigFileLoader):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)


class JsonConfigLoader(ConfigFileLoader):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)


class ConfigLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, ConfigFileLoader] = {
            ".yaml": YamlConfigLoader(),
            ".yml": YamlConfigLoader(),
            ".json": JsonConfigLoader(),
        }

    def get_loader(self, path: Path) -> ConfigFileLoader:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ConfigLoadError(f"Unsupported config format: {ext}")
        return loader


def load_protocol_config(
    path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ProtocolConfig:
    """
    Read a YAML/JSON file (an optional "http" section is honoured) and apply
    overrides on top, typically those coming from the environment.
    """
    data: Dict[str, Any] = {}
    if path:
        p = Path(path)
        data = ConfigLoaderRegistry().get_loader(p).load(p)
        if isinstance(data.get("http"), dict):
            data = data["http"]

    merged = dict(data)
    merged.update(overrides or {})

    try:
        return ProtocolConfig(**merged)
    except PydanticValidationError as e:
        raise ConfigLoadError(f"Invalid protocol config: {e}") from e
