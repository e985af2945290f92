from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from uploader.app_factory import create_app
from uploader.cli.args import parse_args
from uploader.config.ini_config import IniConfig
from uploader.domain.errors import FatalError, ProjectError
from uploader.logging_setup import setup_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_FATAL = 2
EXIT_INTERRUPTED = 130


def resolve_project_root(raw: Optional[str]) -> Path:
    try:
        root = Path(raw).expanduser() if raw else Path.cwd()
        root = root.resolve()
    except OSError as e:
        raise ProjectError(f"Could not determine the project directory: {e}") from e
    if not root.is_dir():
        raise ProjectError(f"Project directory does not exist: {root}")
    return root


def main(argv: Optional[Sequence[str]] = None, *, input_fn: Callable[[], str] = input) -> int:
    args = parse_args(argv)
    # until settings are loaded
    setup_logging("DEBUG" if args.verbose else "INFO")

    try:
        project_root = resolve_project_root(args.project_dir)
        settings = IniConfig.from_env_or_default(project_root).load_settings()
        setup_logging("DEBUG" if args.verbose else settings.log_level)

        service = create_app(settings, input_fn=input_fn)
        result = service.run(reconfigure=args.reconfigure, skip_build=args.skip_build)
    except FatalError as e:
        log.error("FATAL: %s", e)
        return EXIT_FATAL
    except Exception:
        log.exception("Unexpected error")
        return EXIT_FATAL
    except KeyboardInterrupt:
        log.error("Interrupted")
        return EXIT_INTERRUPTED

    log.debug("Run finished status=%s", result.status)
    return EXIT_OK if result.status == "ok" else EXIT_FAILED
