from __future__ import annotations

import json
import logging
import sys
import zipfile
from pathlib import Path

import pytest

from uploader.cli import controller
from uploader.cli.controller import EXIT_FAILED, EXIT_FATAL, EXIT_OK, main
from uploader.services import upload_service as upload_module

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="uses sh syntax")


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    monkeypatch.delenv("UPLOADER_INI", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    yield
    logging.getLogger("uploader").handlers[:] = []


class RecordingPost:
    def __init__(self, status_code: int):
        self.status_code = status_code
        self.received = []

    def __call__(self, url, headers=None, files=None, timeout=None):
        name, fh, _ = files["zip"]
        with zipfile.ZipFile(fh) as zf:
            self.received.append({
                "url": url,
                "auth": headers["Authorization"],
                "filename": name,
                "entries": {n: zf.read(n) for n in zf.namelist()},
            })
        return type("Resp", (), {"status_code": self.status_code, "text": "", "reason": ""})()


def no_input():
    raise AssertionError("should not prompt")


def save_config(root: Path, **values) -> None:
    (root / ".uploader").write_text(json.dumps(values), encoding="utf-8")


@posix_only
def test_end_to_end_success(tmp_path: Path, monkeypatch, capsys):
    save_config(
        tmp_path,
        build_command="mkdir -p build/assets && printf hi > build/index.html && printf x > build/assets/app.js",
        directory="build",
        domain="deploy.example.com",
        auth="tok",
    )
    (tmp_path / ".gitignore").write_text("node_modules\n", encoding="utf-8")
    post = RecordingPost(200)
    monkeypatch.setattr(upload_module.requests, "post", post)

    code = main(["--project-dir", str(tmp_path)], input_fn=no_input)

    assert code == EXIT_OK
    assert post.received == [{
        "url": "https://deploy.example.com",
        "auth": "tok",
        "filename": "output.zip",
        "entries": {"index.html": b"hi", "assets/app.js": b"x"},
    }]
    assert not (tmp_path / "output.zip").exists()
    assert json.loads((tmp_path / ".uploader").read_text(encoding="utf-8"))["domain"] == "https://deploy.example.com"
    assert (tmp_path / ".gitignore").read_text(encoding="utf-8").splitlines() == ["node_modules", ".uploader"]

    out = capsys.readouterr().out
    assert "RUNNING BUILD COMMAND" in out
    assert "BUILD SUCCESSFUL" in out
    assert "ZIP CREATED" in out
    assert "UPLOAD SUCCESSFUL" in out


@posix_only
def test_build_failure_exits_one_without_upload(tmp_path: Path, monkeypatch):
    save_config(tmp_path, build_command="exit 2", directory="build", domain="example.com", auth="tok")
    before = (tmp_path / ".uploader").read_text(encoding="utf-8")
    post = RecordingPost(200)
    monkeypatch.setattr(upload_module.requests, "post", post)

    code = main(["--project-dir", str(tmp_path)], input_fn=no_input)

    assert code == EXIT_FAILED
    assert post.received == []
    assert (tmp_path / ".uploader").read_text(encoding="utf-8") == before


def test_upload_rejected_exits_one_and_cleans_up(tmp_path: Path, monkeypatch):
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "index.html").write_text("hi", encoding="utf-8")
    save_config(tmp_path, build_command="npm run build", directory="build", domain="https://x.dev", auth="bad")
    monkeypatch.setattr(upload_module.requests, "post", RecordingPost(403))

    code = main(["--project-dir", str(tmp_path), "--skip-build"], input_fn=no_input)

    assert code == EXIT_FAILED
    assert not (tmp_path / "output.zip").exists()
    assert (tmp_path / ".uploader").exists()


def test_missing_output_directory_is_fatal(tmp_path: Path, monkeypatch):
    save_config(tmp_path, build_command="npm run build", directory="build", domain="https://x.dev", auth="tok")
    monkeypatch.setattr(upload_module.requests, "post", RecordingPost(200))

    code = main(["--project-dir", str(tmp_path), "--skip-build"], input_fn=no_input)

    assert code == EXIT_FATAL


def test_corrupt_config_is_fatal(tmp_path: Path):
    (tmp_path / ".uploader").write_text("{oops", encoding="utf-8")

    assert main(["--project-dir", str(tmp_path)], input_fn=no_input) == EXIT_FATAL


def test_missing_project_dir_is_fatal(tmp_path: Path):
    assert main(["--project-dir", str(tmp_path / "nope")], input_fn=no_input) == EXIT_FATAL


def test_resolve_project_root_defaults_to_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert controller.resolve_project_root(None) == tmp_path.resolve()


def test_unexpected_error_is_logged_and_exits_fatal(tmp_path: Path, monkeypatch, caplog):
    def broken_create_app(settings, input_fn=None):
        raise RuntimeError("wiring broke")

    monkeypatch.setattr(controller, "create_app", broken_create_app)

    with caplog.at_level("ERROR", logger="uploader"):
        code = main(["--project-dir", str(tmp_path)], input_fn=no_input)

    assert code == EXIT_FATAL
    assert "Unexpected error" in caplog.text
    assert "wiring broke" in caplog.text


def test_token_that_cannot_be_a_header_still_saves_config(tmp_path: Path, monkeypatch):
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "index.html").write_text("hi", encoding="utf-8")
    save_config(tmp_path, build_command="npm run build", directory="build", domain="http://127.0.0.1:9/", auth="токен")

    def post_like_http_client(url, headers=None, files=None, timeout=None):
        headers["Authorization"].encode("latin-1")

    monkeypatch.setattr(upload_module.requests, "post", post_like_http_client)

    code = main(["--project-dir", str(tmp_path), "--skip-build"], input_fn=no_input)

    assert code == EXIT_FAILED
    assert not (tmp_path / "output.zip").exists()
    assert json.loads((tmp_path / ".uploader").read_text(encoding="utf-8"))["auth"] == "токен"
