from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from uploader.domain.errors import ProjectError


@dataclass
class GitignoreRepository:
    """
    Keeps an entry listed in the project's .gitignore, if the project has one.
    """
    project_root: Path

    @property
    def path(self) -> Path:
        return self.project_root / ".gitignore"

    def ensure_entry(self, entry: str) -> bool:
        """
        Appends `entry` as its own line unless a line already equals it.
        Returns True only when the file was changed. No .gitignore, no change.
        """
        if not self.path.exists():
            return False

        try:
            contents = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProjectError(f".gitignore could not be read: {e}") from e

        if entry in (line.rstrip("\r") for line in contents.splitlines()):
            return False

        prefix = "" if (not contents or contents.endswith("\n")) else "\n"
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(prefix + entry + "\n")
        except OSError as e:
            raise ProjectError(f".gitignore could not be written: {e}") from e
        return True
