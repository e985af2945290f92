from __future__ import annotations

from typing import Callable

from uploader.config.ini_config import AppSettings
from uploader.repositories.config_repository import ConfigRepository
from uploader.repositories.gitignore_repository import GitignoreRepository
from uploader.services.archiver import Archiver
from uploader.services.build_runner import BuildRunner
from uploader.services.deploy_service import DeployService
from uploader.services.prompts import ConfigPrompter
from uploader.services.upload_service import UploadService
from uploader.services.url_normalization import DefaultSchemeUrlNormalizer


def create_app(settings: AppSettings, *, input_fn: Callable[[], str] = input) -> DeployService:
    root = settings.project_root

    url_norm = DefaultSchemeUrlNormalizer(default_scheme=settings.default_scheme)

    prompter = ConfigPrompter(url_normalizer=url_norm, input_fn=input_fn)

    build_runner = BuildRunner(
        project_root=root,
        timeout_seconds=settings.build_timeout,
    )

    upload_service = UploadService(
        timeout_seconds=settings.upload_timeout_seconds or None,
    )

    return DeployService(
        config_repo=ConfigRepository(project_root=root),
        gitignore_repo=GitignoreRepository(project_root=root),
        prompter=prompter,
        build_runner=build_runner,
        archiver=Archiver(project_root=root),
        upload_service=upload_service,
    )
