######## models.py
########

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from uploader.domain.errors import ConfigError

DEFAULT_BUILD_COMMAND = "npm run build"
DEFAULT_DIRECTORY = "build"


@dataclass(frozen=True)
class DeployConfig:
    build_command: Optional[str] = None
    directory: Optional[str] = None
    domain: Optional[str] = None
    auth: Optional[str] = None

    @staticmethod
    def defaults() -> "DeployConfig":
        return DeployConfig(build_command=DEFAULT_BUILD_COMMAND, directory=DEFAULT_DIRECTORY)

    def missing_fields(self) -> list[str]:
        return [name for name in ("directory", "domain", "auth") if not getattr(self, name)]

    def require_deployable(self) -> "DeployConfig":
        missing = self.missing_fields()
        if missing:
            raise ConfigError(f"Configuration incomplete, missing: {', '.join(missing)}")
        return self

    def describe(self) -> str:
        # auth is never shown
        not_set = "not set"
        return (
            f"\tDomain: {self.domain or not_set},\n"
            f"\tOutput Directory: {self.directory or not_set},\n"
            f"\tBuild Command: {self.build_command or not_set}"
        )


@dataclass
class ConfigBuilder:
    """
    Accumulates resolved fields during the configure phase.
    build() hands out an immutable DeployConfig; nothing downstream mutates it.
    """
    build_command: Optional[str] = None
    directory: Optional[str] = None
    domain: Optional[str] = None
    auth: Optional[str] = None

    @staticmethod
    def from_config(config: DeployConfig) -> "ConfigBuilder":
        return ConfigBuilder(
            build_command=config.build_command,
            directory=config.directory,
            domain=config.domain,
            auth=config.auth,
        )

    def set(self, name: str, value: Optional[str]) -> "ConfigBuilder":
        if name not in ("build_command", "directory", "domain", "auth"):
            raise KeyError(name)
        setattr(self, name, value)
        return self

    def build(self) -> DeployConfig:
        return DeployConfig(
            build_command=self.build_command,
            directory=self.directory,
            domain=self.domain,
            auth=self.auth,
        )


@dataclass(frozen=True)
class ArchiveEntry:
    arcname: str                # forward slashes, relative to the output directory
    source: Path
    size_bytes: int


@dataclass(frozen=True)
class ArchiveResult:
    path: Path
    entries: tuple[ArchiveEntry, ...] = ()

    @property
    def total_bytes(self) -> int:
        return sum(e.size_bytes for e in self.entries)


@dataclass(frozen=True)
class BuildResult:
    status: str                 # "ok" | "failed" | "skipped"
    command: Optional[str]
    exit_code: Optional[int] = None
    duration_seconds: float = 0.0
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status != "failed"


@dataclass(frozen=True)
class UploadResult:
    status: str                 # "ok" | "http_error" | "transport_error"
    url: str
    status_code: Optional[int] = None
    message: str = ""
    archive_removed: bool = True
    cleanup_error: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True)
class DeployResult:
    config: DeployConfig
    build: BuildResult
    upload: Optional[UploadResult] = None
    config_written: bool = False
    gitignore_updated: bool = False
    archive_entries: tuple[ArchiveEntry, ...] = field(default_factory=tuple)

    @property
    def status(self) -> str:
        if not self.build.succeeded:
            return "build_failed"
        if self.upload is None or not self.upload.succeeded:
            return "upload_failed"
        return "ok"
