from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests

from uploader.domain.errors import ArchiveError
from uploader.domain.models import UploadResult

log = logging.getLogger(__name__)

FILE_FIELD = "zip"


def _body_excerpt(resp: requests.Response, limit: int = 200) -> str:
    return (resp.text or "")[:limit]


@dataclass
class UploadService:
    """
    One best-effort multipart POST of the archive. Upload failures are reported in the result;
    the local archive is removed afterwards no matter what happened.
    """
    timeout_seconds: Optional[float] = None
    file_field: str = FILE_FIELD

    def _post(self, url: str, auth: str, archive_path: Path) -> requests.Response:
        with open(archive_path, "rb") as fh:
            return requests.post(
                url,
                headers={"Authorization": auth},
                files={self.file_field: (archive_path.name, fh, "application/zip")},
                timeout=self.timeout_seconds,
            )

    def upload(self, archive_path: Path, url: str, auth: str) -> UploadResult:
        try:
            result = self._attempt(archive_path, url, auth)
        finally:
            removed, cleanup_error = self._remove(archive_path)

        return UploadResult(
            status=result.status,
            url=result.url,
            status_code=result.status_code,
            message=result.message,
            archive_removed=removed,
            cleanup_error=cleanup_error,
        )

    def _attempt(self, archive_path: Path, url: str, auth: str) -> UploadResult:
        log.info("UPLOADING %s TO %s", archive_path.name, url)
        try:
            resp = self._post(url, auth, archive_path)
        except requests.Timeout as e:
            log.info("ERROR UPLOADING, timed out: %s", e)
            return UploadResult(status="transport_error", url=url, message=f"timeout: {e}")
        except requests.RequestException as e:
            log.info("ERROR UPLOADING, %s", e)
            return UploadResult(status="transport_error", url=url, message=str(e))
        except (UnicodeError, ValueError) as e:
            # e.g. an auth token http.client cannot encode as a header value
            log.info("ERROR UPLOADING, invalid request: %s", e)
            return UploadResult(status="transport_error", url=url, message=f"invalid request: {e}")
        except OSError as e:
            raise ArchiveError(f"Could not read archive {archive_path}: {e}", path=archive_path) from e

        if 200 <= resp.status_code < 300:
            log.info("UPLOAD SUCCESSFUL: %s", resp.status_code)
            return UploadResult(status="ok", url=url, status_code=resp.status_code)

        excerpt = _body_excerpt(resp)
        log.info("UPLOAD FAILED: %s %s", resp.status_code, resp.reason or "")
        if excerpt:
            log.debug("Response body: %s", excerpt)
        return UploadResult(status="http_error", url=url, status_code=resp.status_code, message=excerpt)

    @staticmethod
    def _remove(archive_path: Path) -> tuple[bool, str]:
        try:
            os.remove(archive_path)
        except FileNotFoundError:
            return True, ""
        except OSError as e:
            log.error("ERROR REMOVING ZIP FILE: %s", e)
            return False, str(e)
        log.debug("Removed %s", archive_path)
        return True, ""
