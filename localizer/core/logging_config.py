"""Logging configuration for applications embedding the localizer."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import settings

# Log levels for different components
LOGGING_CONFIG = {
    "localizer": logging.INFO,
    "localizer.core.i18n": logging.INFO,
    "localizer.core.tags": logging.WARNING,

    # Reduce noise from libraries
    "dotenv": logging.WARNING,
    "asyncio": logging.ERROR,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter: colored level, ``localizer.core.i18n`` shown as ``localizer.i18n``."""

    # Load notices are DEBUG, bundle failures WARNING
    COLORS = {
        'DEBUG': '\033[2m',     # Dim
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
    }
    RESET = '\033[0m'
    INTERNAL_PREFIX = "localizer.core."

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        if name.startswith(self.INTERNAL_PREFIX):
            record.name = "localizer." + name[len(self.INTERNAL_PREFIX):]

        result = super().format(record)

        # Reset for other handlers
        record.levelname, record.name = levelname, name

        return result


def setup_logging(
    log_file: bool = False,
    debug: bool = False,
    log_dir: Union[str, Path] = "logs",
    level: Optional[str] = None,
) -> None:
    """Configure the root logger and per-component levels."""
    console_level = logging.DEBUG if debug else logging.getLevelName(level or settings.LOG_LEVEL)
    if not isinstance(console_level, int):
        console_level = logging.INFO
    debug = debug or console_level <= logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else console_level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_filename = log_path / f"localizer_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)

        # Detailed format for file
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, component_level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else component_level)

    logging.getLogger(__name__).info(
        f"Logging configured (console={logging.getLevelName(console_level)}, "
        f"file={'ENABLED' if log_file else 'DISABLED'})"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
