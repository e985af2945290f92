from __future__ import annotations

import logging
from dataclasses import dataclass

from uploader.domain.models import BuildResult, DeployConfig, DeployResult
from uploader.repositories.config_repository import ConfigRepository
from uploader.repositories.gitignore_repository import GitignoreRepository
from uploader.services.archiver import Archiver
from uploader.services.build_runner import BuildRunner
from uploader.services.prompts import ConfigPrompter
from uploader.services.upload_service import UploadService

log = logging.getLogger(__name__)


@dataclass
class DeployService:
    """
    Service layer: configure -> build -> archive -> upload -> persist config.
    Fatal problems raise; build and upload failures come back in the DeployResult.
    """
    config_repo: ConfigRepository
    gitignore_repo: GitignoreRepository
    prompter: ConfigPrompter
    build_runner: BuildRunner
    archiver: Archiver
    upload_service: UploadService

    def configure(self, *, reconfigure: bool = False) -> DeployConfig:
        existing = self.config_repo.load()
        if existing is not None:
            log.info("\nCONFIG:\n%s\n", existing.describe())
        return self.prompter.resolve(existing, reconfigure=reconfigure).require_deployable()

    def run(self, *, reconfigure: bool = False, skip_build: bool = False) -> DeployResult:
        config = self.configure(reconfigure=reconfigure)

        if skip_build:
            log.info("SKIPPING BUILD")
            build = BuildResult(status="skipped", command=config.build_command, message="skipped on request")
        else:
            build = self.build_runner.run(config.build_command)

        # Nothing is archived, uploaded or persisted after a failed build
        if not build.succeeded:
            log.info("build failed, exiting")
            return DeployResult(config=config, build=build)

        archive = self.archiver.create(config.directory)
        upload = self.upload_service.upload(archive.path, config.domain, config.auth)

        config_path = self.config_repo.save(config)
        log.info("CONFIG WRITTEN: %s", config_path)

        gitignore_updated = self.gitignore_repo.ensure_entry(self.config_repo.filename)
        if gitignore_updated:
            log.info("ADDED %s TO .gitignore", self.config_repo.filename)

        return DeployResult(
            config=config,
            build=build,
            upload=upload,
            config_written=True,
            gitignore_updated=gitignore_updated,
            archive_entries=archive.entries,
        )
