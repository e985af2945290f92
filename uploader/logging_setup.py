import logging
import sys

PLAIN_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Status lines are the whole UX, so INFO goes to stdout as bare messages.
    """
    numeric = logging.getLevelName((level or "INFO").upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if numeric <= logging.DEBUG else PLAIN_FORMAT))

    root = logging.getLogger("uploader")
    root.handlers[:] = [handler]
    root.setLevel(numeric)
