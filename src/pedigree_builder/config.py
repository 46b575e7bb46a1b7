import os

import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "pedigree_builder.yml"
CONFIG_ENV_VAR = "PEDIGREE_BUILDER_CONFIG"

class PBConfig:
    def __init__(self, data, source=None):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)
        # None when running on built-in defaults
        self.source = source

def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH

def load_config() -> 'PBConfig':
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return PBConfig(data, source=path)

def default_config() -> 'PBConfig':
    """Settings used when no YAML file is available (e.g. an installed package)."""
    return PBConfig({})

_config_cache = None

def get_config() -> 'PBConfig':
    global _config_cache
    if _config_cache is None:
        if config_path().exists():
            _config_cache = load_config()
        else:
            _config_cache = default_config()
    return _config_cache

def reset_config() -> None:
    """Drop the cached settings so the next get_config() reads them again."""
    global _config_cache
    _config_cache = None
