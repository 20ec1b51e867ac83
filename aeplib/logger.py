# aeplib/logger.py
import logging
import os
import sys
from typing import Any, Optional

import requests

logger = logging.getLogger("aeplib")

_HANDLER_NAME = "aeplib-stream"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send aeplib logs to stderr. Level comes from `level` or AEPLIB_LOG_LEVEL
    (default INFO). Safe to call more than once.
    """
    level = (level or os.getenv("AEPLIB_LOG_LEVEL", "INFO")).upper()
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)

    return logger


def log_request(ctx: Any, request: requests.Request) -> None:
    """Default request hook"""
    logger.debug("request %s %s", request.method, request.url, extra={"ctx": ctx})


def log_response(ctx: Any, response: requests.Response) -> None:
    """Default response hook"""
    logger.debug(
        "response %s %s -> %s",
        response.request.method if response.request is not None else "-",
        response.url,
        response.status_code,
        extra={"ctx": ctx},
    )
