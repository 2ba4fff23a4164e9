"""
Cart Parser Logging
Component logger with console output and an optional rotating log file.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from . import cart_config as cfg
from .models import CartResult, ValidationError


class CartLogger:
    """Centralized logging for the cart parser with optional file rotation."""

    LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

    def __init__(
        self,
        name: str = "cart_parser",
        log_dir: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        """
        Args:
            name: Logger name
            log_dir: Directory for the rotating log file; no file log when empty
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self.log_dir = cfg.LOG_DIR if log_dir is None else log_dir
        level_name = (log_level or cfg.LOG_LEVEL).upper()

        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level_name, logging.INFO))
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.propagate = False

        formatter = logging.Formatter(self.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if self.log_dir:
            log_path = Path(self.log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path / "cart_parser.log",
                maxBytes=cfg.LOG_MAX_MB * 1024 * 1024,
                backupCount=cfg.LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message, component=""):
        self._log(logging.DEBUG, message, component)

    def info(self, message, component=""):
        self._log(logging.INFO, message, component)

    def warning(self, message, component=""):
        self._log(logging.WARNING, message, component)

    def error(self, message, component="", exc_info=False):
        self._log(logging.ERROR, message, component, exc_info=exc_info)

    def _log(self, level, message, component="", exc_info=False):
        """Prefix the message with its component and emit it."""
        if component:
            message = f"[{component}] {message}"
        self.logger.log(level, message, exc_info=exc_info)

    # ------------------------------------------------------------------
    # Parser events
    # ------------------------------------------------------------------

    def log_parse_start(self, source_path: str) -> None:
        self.debug(f"Parsing cart file {source_path}", component="CartParser")

    def log_validation_errors(
        self, source_path: str, errors: List[ValidationError]
    ) -> None:
        for err in errors:
            self.error(
                f"{err.type.value} error at row {err.row}, column {err.column}: {err.message}",
                component="CartValidator",
            )
        self.warning(
            f"Validation failed for {source_path} with {len(errors)} error(s)",
            component="CartParser",
        )

    def log_parse_complete(self, source_path: str, result: CartResult) -> None:
        self.info(
            f"Parsed {len(result.items)} item(s) from {source_path} - total {result.total:.2f}",
            component="CartParser",
        )
