"""Utility for loading environment variables from a .env file."""

import logging
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


def load_env_file(env_path: str | None = None) -> bool:
    """Load environment variables from a .env file.

    Variables already present in the environment are left untouched.

    Args:
        env_path: Path to the .env file. If None, searches the current
                 directory and its parents.

    Returns:
        True if a .env file was found and loaded
    """
    if env_path is None:
        env_path = find_dotenv(usecwd=True)

    if not env_path or not Path(env_path).exists():
        logger.debug("No .env file found")
        return False

    loaded = load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment variables from {env_path}")
    return loaded
