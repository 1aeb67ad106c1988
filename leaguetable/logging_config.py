"""Logging setup for command-line runs."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the 'leaguetable' logger.

    Library modules log under 'leaguetable.<module>' and inherit these
    handlers. Calling this again replaces the previous handlers.

    Args:
        level: Logging level for every handler
        log_dir: If given, also write a timestamped standings_*.log file here
        log_to_console: Echo log records to stdout

    Returns:
        The configured 'leaguetable' logger
    """
    logger = logging.getLogger('leaguetable')
    logger.setLevel(level)
    logger.handlers = []

    handlers: list[logging.Handler] = []
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'standings_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        handlers.append(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(console_handler)

    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    return logger
