from .config_repository import CONFIG_FILENAME, ConfigRepository
from .gitignore_repository import GitignoreRepository

__all__ = ["CONFIG_FILENAME", "ConfigRepository", "GitignoreRepository"]
