import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "ftt_parser.yml"
CONFIG_ENV_VAR = "FTT_PARSER_CONFIG"

DEFAULT_SUPPORTED_VERSION = "0.1"
DUPLICATE_POLICIES = ("fatal", "lenient")


class FTTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.parser = data.get("parser", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def supported_version(self) -> str:
        return str(self.parser.get("supported_version", DEFAULT_SUPPORTED_VERSION))

    @property
    def duplicate_ids(self) -> str:
        policy = str(self.parser.get("duplicate_ids", "fatal")).lower()
        if policy not in DUPLICATE_POLICIES:
            raise ValueError(
                f"parser.duplicate_ids must be one of {DUPLICATE_POLICIES}, got {policy!r}"
            )
        return policy


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'FTTConfig':
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTTConfig(data)

_config_cache = None

def get_config() -> 'FTTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
