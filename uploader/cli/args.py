from __future__ import annotations

import argparse
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uploader",
        description="Build the project, zip the output directory and upload it to your endpoint.",
    )
    parser.add_argument(
        "--project-dir",
        help="Project root holding .uploader and the output directory (defaults to the current directory).",
    )
    parser.add_argument(
        "--reconfigure",
        action="store_true",
        help="Ask for every setting again, even when .uploader exists.",
    )
    parser.add_argument(
        "--skip-build",
        action="store_true",
        help="Upload the existing output directory without running the build command.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
