"""Logging configuration shared by the Streamlit app and the CLI."""
from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger to write to stdout.

    Streamlit re-executes the app script on every interaction, so the handler
    is only attached once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if any(getattr(handler, "_fund_dashboard", False) for handler in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    handler._fund_dashboard = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
