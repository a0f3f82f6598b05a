"""
Logging helpers shared by the API, the UI and the core services
"""
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(
    name: str = "root",
    log_file: Optional[str] = None,
    level: int = logging.INFO
) -> logging.Logger:
    """
    Configure a logger with a console handler and an optional file handler

    Args:
        name: Logger name ("root" configures the root logger)
        log_file: Optional path of the log file
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger() if name == "root" else logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicated handlers on Streamlit reruns / uvicorn reloads
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger"""
    return logging.getLogger(name)
