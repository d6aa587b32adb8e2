"""
Logging setup

Configures the root logger from the ``logging`` config section.
"""

import logging
import sys
from pathlib import Path

from .config import config


def setup_logging():
    """Configure console and file logging"""

    log_config = config.get_logging_config()
    log_level = getattr(logging, log_config["level"].upper())
    formatter = logging.Formatter(log_config["format"])

    logging.getLogger().setLevel(log_level)

    # Drop handlers left by earlier setups
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logging.root.addHandler(console_handler)

    log_file = log_config["file"]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(filename=log_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logging.root.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized")
    logger.info(f"Log level: {log_config['level']}")
    if log_file:
        logger.info(f"Log file: {Path(log_file).absolute()}")


def get_logger(name: str = None) -> logging.Logger:
    """Return the named logger, or the root logger"""
    if name is None:
        return logging.getLogger()
    return logging.getLogger(name)
