from .errors import ArchiveError, ConfigError, FatalError, ProjectError, SettingsError, UploaderError
from .models import (
    ArchiveEntry,
    ArchiveResult,
    BuildResult,
    ConfigBuilder,
    DeployConfig,
    DeployResult,
    UploadResult,
)

__all__ = [
    "ArchiveEntry",
    "ArchiveResult",
    "BuildResult",
    "ConfigBuilder",
    "DeployConfig",
    "DeployResult",
    "UploadResult",
    "UploaderError",
    "FatalError",
    "SettingsError",
    "ConfigError",
    "ArchiveError",
    "ProjectError",
]
