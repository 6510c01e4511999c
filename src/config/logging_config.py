"""Logging bootstrap for the API process."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once at startup.

    Unknown level names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # psycopg_pool is chatty at INFO about connection churn
    logging.getLogger("psycopg.pool").setLevel(max(numeric_level, logging.WARNING))
