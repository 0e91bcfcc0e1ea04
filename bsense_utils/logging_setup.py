# bsense_utils/logging_setup.py
import logging
from typing import Literal

Level = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(level: str, *, quiet: bool = False, verbose: bool = False) -> str:
    """CLI flags win over the configured level; --verbose beats --quiet."""
    if verbose:
        return "DEBUG"
    if quiet:
        return "WARNING"
    return (level or "INFO").upper()


def setup_logging(level: Level = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
