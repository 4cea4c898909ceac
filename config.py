import os
import yaml

from settings_schema import AnalyticsSettings, validate_settings


class YamlConfig:
    """Load and save analytics settings to a YAML file."""

    ENV_VAR = "ANALYTICS_SETTINGS"

    def __init__(self, path: str | None = None) -> None:
        self.path = path or os.environ.get(self.ENV_VAR, "analytics.yaml")

    def load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def save(self, data: dict) -> None:
        validate_settings(data)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(dict(data), f)


def load_settings(path: str | None = None) -> AnalyticsSettings:
    """Return validated settings; missing keys take their defaults."""
    return validate_settings(YamlConfig(path).load())
