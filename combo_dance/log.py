from __future__ import annotations

import logging
import os
from typing import Optional

ENV_LEVEL = "COMBO_DANCE_LOG_LEVEL"


def _parse_level(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    v = str(s).strip().upper()
    if not v:
        return None
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
    }
    return mapping.get(v)


def resolve_level(quiet: bool = False, debug: bool = False) -> int:
    level = logging.INFO
    if quiet:
        level = logging.WARNING
    if debug:
        level = logging.DEBUG
    env_level = _parse_level(os.environ.get(ENV_LEVEL))
    if env_level is not None:
        level = env_level
    return level


def setup_logging(quiet: bool = False, debug: bool = False, *, name: str = "combo_dance") -> int:
    """Configure python logging once and return the level in effect.

    Priority (highest first): env COMBO_DANCE_LOG_LEVEL, ``debug``,
    ``quiet``, default INFO. Does nothing if the root logger already has
    handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return root.level

    level = resolve_level(quiet, debug)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger(name).debug(
        "logging initialized (level=%s, quiet=%s, debug=%s)",
        logging.getLevelName(level),
        quiet,
        debug,
    )
    return level
