"""Pack the build output directory into a single zip in the project root."""

from __future__ import annotations

import logging
import os
import posixpath
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from uploader.domain.errors import ArchiveError
from uploader.domain.models import ArchiveEntry, ArchiveResult

ARCHIVE_NAME = "output.zip"

log = logging.getLogger(__name__)


def normalize_directory(directory: str) -> str:
    """``./build/`` and ``build\\`` both become ``build``."""
    cleaned = (directory or "").strip().replace("\\", "/")
    return posixpath.normpath(cleaned) if cleaned else ""


def archive_name_for(rel_to_root: str, directory: str) -> str:
    """Forward slashes, with the ``<directory>/`` prefix stripped once."""
    name = rel_to_root.replace("\\", "/")
    prefix = directory + "/"
    if name.startswith(prefix):
        name = name[len(prefix):]
    return name


def _iter_files(top: Path) -> Iterator[Path]:
    # sorted at every level so the entry order does not depend on the filesystem
    for root, dirs, files in os.walk(top):
        dirs.sort()
        for filename in sorted(files):
            path = Path(root) / filename
            if os.path.isfile(path):
                yield path


@dataclass
class Archiver:
    """
    Zips <project_root>/<directory> into <project_root>/output.zip.
    Entry names are relative to the output directory itself.
    """
    project_root: Path
    archive_name: str = ARCHIVE_NAME

    @property
    def archive_path(self) -> Path:
        return self.project_root / self.archive_name

    def create(self, directory: str) -> ArchiveResult:
        directory = normalize_directory(directory)
        if not directory:
            raise ArchiveError("Output directory not set")

        source_dir = self.project_root / directory
        log.info("ZIPPING OUTPUT DIRECTORY: %s", source_dir)

        if not source_dir.is_dir():
            raise ArchiveError(f"Output directory does not exist: {source_dir}", path=source_dir)

        output_path = self.archive_path
        entries: list[ArchiveEntry] = []
        try:
            with zipfile.ZipFile(output_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
                for path in _iter_files(source_dir):
                    if path == output_path:
                        continue
                    arcname = archive_name_for(os.path.relpath(path, self.project_root), directory)
                    zf.write(path, arcname=arcname)
                    entries.append(ArchiveEntry(arcname=arcname, source=path, size_bytes=path.stat().st_size))
                    log.debug("Added %s", arcname)
        except OSError as e:
            raise ArchiveError(f"Could not write archive {output_path}: {e}", path=output_path) from e

        result = ArchiveResult(path=output_path, entries=tuple(entries))
        log.info("ZIP CREATED: %s (%d files, %d bytes)", output_path, len(entries), result.total_bytes)
        return result
