import os
from pathlib import Path

import yaml

from gedcom_codec.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_codec.yml"
CONFIG_ENV_VAR = "GEDCOM_CODEC_CONFIG"

DEFAULT_SOURCE = "GenealogyApp"


class GCConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.export = data.get("export", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def source(self) -> str:
        return str(self.export.get("source") or DEFAULT_SOURCE)


def load_config(path=None) -> 'GCConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return GCConfig({})

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    return GCConfig(data)

_config_cache = None

def get_config() -> 'GCConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads it."""
    global _config_cache
    _config_cache = None
