"""
Configuration: YAML file + environment variables (.env supported)
"""
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "CLASS_COMPARATOR_"
DEFAULT_CONFIG_PATH = Path("config/config.yaml")

DEFAULTS = {
    "logging": {
        "level": "INFO",
        "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        "file": "logs/app.log",
        "rotation": "500 MB",
        "retention": "10 days",
    }
}


class Config:
    """
    Dotted-key access to settings

    Lookup order for 'logging.level':
        1. env CLASS_COMPARATOR_LOGGING_LEVEL
        2. config file
        3. built-in defaults
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        path = path or os.getenv(f"{ENV_PREFIX}CONFIG") or DEFAULT_CONFIG_PATH
        self.path = Path(path)
        self.data = self._load(self.path)

    @staticmethod
    def _load(path: Path) -> dict:
        if not path.exists():
            return {}
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return data

    def get(self, key: str, default: Any = None) -> Any:
        env_value = os.getenv(ENV_PREFIX + key.upper().replace(".", "_"))
        if env_value is not None:
            return env_value

        for source in (self.data, DEFAULTS):
            value = _lookup(source, key)
            if value is not None:
                return value
        return default


def _lookup(data: dict, key: str) -> Any:
    node = data
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


config = Config()
