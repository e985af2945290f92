from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from uploader.domain.errors import ConfigError
from uploader.domain.models import DeployConfig

CONFIG_FILENAME = ".uploader"
CONFIG_FIELDS = ("build_command", "directory", "domain", "auth")

log = logging.getLogger(__name__)


def _parse(raw: str, path: Path) -> DeployConfig:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object", path=path)

    values = {}
    for key in CONFIG_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Config field '{key}' in {path} must be a string or null", path=path)
        values[key] = value
    return DeployConfig(**values)


@dataclass
class ConfigRepository:
    """
    Repository pattern: the persisted deploy configuration in the project root.
    """
    project_root: Path
    filename: str = CONFIG_FILENAME

    @property
    def path(self) -> Path:
        return self.project_root / self.filename

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Optional[DeployConfig]:
        if not self.exists():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Config file {self.path} could not be read: {e}", path=self.path) from e
        config = _parse(raw, self.path)
        log.debug("Loaded config from %s", self.path)
        return config

    def save(self, config: DeployConfig) -> Path:
        serialized = json.dumps(asdict(config), indent=2)
        try:
            self.path.write_text(serialized, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Config file {self.path} could not be written: {e}", path=self.path) from e
        return self.path
