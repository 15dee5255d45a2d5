"""
Logging setup shared by the API process and the uvicorn runner.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging and quieten per-request httpx chatter."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
