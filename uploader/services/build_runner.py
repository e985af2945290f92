from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from uploader.domain.models import BuildResult

log = logging.getLogger(__name__)


@dataclass
class BuildRunner:
    """
    Runs the user's build command through the platform shell in the project root.
    Output goes straight to the terminal. A failing build is a result, not an exception.
    """
    project_root: Path
    timeout_seconds: Optional[int] = None

    def _run_command(self, command: str) -> subprocess.CompletedProcess:
        # shell=True is "sh -c" on POSIX and "cmd /C" on Windows
        return subprocess.run(
            command,
            shell=True,
            cwd=str(self.project_root),
            timeout=self.timeout_seconds,
        )

    def run(self, command: Optional[str]) -> BuildResult:
        command = (command or "").strip()
        if not command:
            log.info("NO BUILD COMMAND SET")
            return BuildResult(status="skipped", command=None)

        log.info("RUNNING BUILD COMMAND: %s", command)
        started = datetime.now()

        try:
            proc = self._run_command(command)
        except subprocess.TimeoutExpired:
            duration = (datetime.now() - started).total_seconds()
            log.info("BUILD FAILED: timed out after %ss", self.timeout_seconds)
            return BuildResult(
                status="failed",
                command=command,
                duration_seconds=duration,
                message=f"timed out after {self.timeout_seconds}s",
            )
        except OSError as e:
            log.info("ERROR RUNNING BUILD COMMAND: %s", e)
            return BuildResult(status="failed", command=command, message=str(e))

        duration = (datetime.now() - started).total_seconds()

        if proc.returncode != 0:
            log.info("BUILD FAILED: exit status %s", proc.returncode)
            return BuildResult(
                status="failed",
                command=command,
                exit_code=proc.returncode,
                duration_seconds=duration,
                message=f"exit status {proc.returncode}",
            )

        log.info("BUILD SUCCESSFUL (%.1fs)", duration)
        return BuildResult(status="ok", command=command, exit_code=0, duration_seconds=duration)
