import os
from typing import Optional

import yaml

from .settings_schema import EngineSettings, validate_settings

SETTINGS_ENV = "ADAPTIVE_LOAD_SETTINGS"


class YamlConfig:
    """Load and save engine settings to a YAML file."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or os.environ.get(SETTINGS_ENV, "adaptive_load.yaml")

    def load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def save(self, data: dict) -> None:
        out = dict(data)
        if "landmarks" in out:
            out["landmarks"] = {k: list(v) for k, v in out["landmarks"].items()}
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(out, f)

    def settings(self) -> EngineSettings:
        """Return the validated settings, defaults filled in."""
        return validate_settings(self.load())
