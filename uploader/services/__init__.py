from .archiver import Archiver
from .build_runner import BuildRunner
from .deploy_service import DeployService
from .prompts import ConfigPrompter
from .upload_service import UploadService
from .url_normalization import UrlNormalizer, DefaultSchemeUrlNormalizer

__all__ = [
    "Archiver",
    "BuildRunner",
    "ConfigPrompter",
    "DeployService",
    "UploadService",
    "UrlNormalizer",
    "DefaultSchemeUrlNormalizer",
]
