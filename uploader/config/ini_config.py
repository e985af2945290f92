########## ini_config.py

import os
from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from uploader.domain.errors import SettingsError

INI_DEFAULT_NAME = "uploader.ini"


@dataclass(frozen=True)
class AppSettings:
    project_root: Path

    # 0 means wait for the build as long as it takes
    build_timeout_seconds: int
    upload_timeout_seconds: int

    default_scheme: str

    log_level: str

    @property
    def build_timeout(self) -> Optional[int]:
        return self.build_timeout_seconds or None


class IniConfig:
    """
    Adapter around ConfigParser for the tool's own settings.
    A missing default INI is fine (fallbacks apply); an explicit UPLOADER_INI must be readable.
    """

    def __init__(self, ini_path: Optional[Path], project_root: Path, *, required: bool = False):
        self._ini_path = ini_path
        self._project_root = project_root
        self._cfg = ConfigParser()
        if ini_path is None:
            return
        try:
            read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        except ConfigParserError as e:
            raise SettingsError(f"INI file could not be parsed: {ini_path}: {e}") from e
        if required and not read_ok:
            raise SettingsError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default(project_root: Path) -> "IniConfig":
        ini_raw = (os.getenv("UPLOADER_INI") or "").strip()
        if ini_raw:
            ini_path = Path(os.path.expandvars(os.path.expanduser(ini_raw)))
            return IniConfig(ini_path, project_root, required=True)
        # If UPLOADER_INI is not set, fall back to an optional INI in the project root
        default_path = project_root / INI_DEFAULT_NAME
        return IniConfig(default_path if default_path.is_file() else None, project_root)

    @property
    def ini_path(self) -> Optional[Path]:
        return self._ini_path

    def _getint(self, section: str, key: str, fallback: int) -> int:
        try:
            value = self._cfg.getint(section, key, fallback=fallback)
        except ValueError as e:
            raise SettingsError(f"[{section}] {key} must be an integer") from e
        if value < 0:
            raise SettingsError(f"[{section}] {key} must not be negative")
        return value

    def load_settings(self) -> AppSettings:
        # Execution
        build_timeout_seconds = self._getint("build", "timeout_seconds", fallback=0)
        upload_timeout_seconds = self._getint("upload", "timeout_seconds", fallback=300)

        # URL normalization
        default_scheme = (self._cfg.get("url_normalization", "default_scheme", fallback="https") or "").strip() or "https"

        # Logging (env wins over INI)
        log_level = (os.getenv("LOG_LEVEL") or self._cfg.get("logging", "level", fallback="INFO") or "").strip().upper() or "INFO"

        return AppSettings(
            project_root=self._project_root,
            build_timeout_seconds=build_timeout_seconds,
            upload_timeout_seconds=upload_timeout_seconds,
            default_scheme=default_scheme,
            log_level=log_level,
        )
