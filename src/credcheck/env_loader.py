#!/usr/bin/env python3
"""
Optional .env support.

Lines are ``KEY=value``. Blank lines and ``#`` comments are skipped and
matching quotes around a value are removed. Variables already set in
the real environment are never overwritten.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def parse_env_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Parse .env lines into a mapping, later keys winning."""
    values: Dict[str, str] = {}
    for line_num, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        if not sep or not key.strip():
            logger.warning(f"Ignoring malformed .env line {line_num}")
            continue

        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        values[key.strip()] = value
    return values


def load_env_file(env_file_path: str = ".env", env_path: Optional[Path] = None) -> int:
    """
    Copy variables from a .env file into the environment.

    Args:
        env_file_path: File name relative to the project root
        env_path: Explicit file location, overrides env_file_path

    Returns:
        Number of variables actually set

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    env_path = env_path or PROJECT_ROOT / env_file_path
    if not env_path.is_file():
        logger.debug(f"No .env file at {env_path}")
        return 0

    try:
        values = parse_env_lines(env_path.read_text(encoding='utf-8').splitlines())
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(str(env_path), f"unreadable .env file: {e}")

    new_keys = [key for key in values if key not in os.environ]
    for key in new_keys:
        os.environ[key] = values[key]

    logger.info(f"Loaded {len(new_keys)} of {len(values)} variables from {env_path}")
    return len(new_keys)
