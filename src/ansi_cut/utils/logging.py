"""
Logging setup for the ansi_cut demo.
"""

import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: str) -> int:
    if level.isdigit():
        return int(level)
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def setup_logging(
    level: str = "INFO",
    format_str: str = DEFAULT_FORMAT,
    log_file: str | None = None,
) -> logging.Logger:
    """Route ansi_cut logs to a file and errors to the console.

    Calling it again replaces the handlers installed by a previous call.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or a number as a string
        format_str: Format used by every handler
        log_file: File receiving all records at ``level`` and above

    Returns:
        logging.Logger: The root logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(format_str)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # stdout carries the demo output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    scanner_level = logging.WARNING if numeric_level > logging.DEBUG else logging.NOTSET
    logging.getLogger("ansi_cut.parsing.scanner").setLevel(scanner_level)

    logging.getLogger(__name__).debug(f"Logging set to {level}, file={log_file}")
    return root_logger
