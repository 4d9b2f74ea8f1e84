"""
Logging setup: human-readable console output, optional rotating log file.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from config.settings import LoggingConfig, get_logging_config
from shared.json_log_formatter import JsonLogFormatter

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure le logger racine.

    Args:
        config: Configuration logging (défaut: settings globaux)

    Returns:
        Le logger racine configuré
    """
    config = config or get_logging_config()

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    handlers[0].setFormatter(logging.Formatter(TEXT_LOG_FORMAT))

    if config.log_file_path:
        config.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file_path,
            maxBytes=config.log_max_size_mb * 1024 * 1024,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        if config.log_format == "json":
            file_handler.setFormatter(JsonLogFormatter())
        else:
            file_handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        handlers=handlers,
        force=True,
    )
    root = logging.getLogger()
    root.debug(f"Logging configured (level={config.log_level}, file={config.log_file_path})")
    return root
