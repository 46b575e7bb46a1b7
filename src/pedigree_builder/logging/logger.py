"""
Centralized logging configuration for pedigree_builder.

Key behaviors
-------------
* Single entry point via ``get_logger`` so every module shares handlers/formatters.
* Master log file (default: ``logs/pedigree_builder.log``) plus per-module logs.
* Console output follows the configured ``debug`` flag.
* Optional log rotation controlled by ``config/pedigree_builder.yml``.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pedigree_builder.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "pedigree_builder"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotation: Optional[Tuple[int, int]] = None  # (max_bytes, backup_count)
_file_logging: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _file_handler(path: Path, level: int) -> logging.Handler:
    if _rotation is not None:
        max_bytes, backup_count = _rotation
        handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _level_for(cfg) -> int:
    if getattr(cfg, "debug", False):
        return logging.DEBUG
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_base_logger() -> Logger:
    """Attach the master file + console handlers once."""
    global _base_configured, _effective_level, _rotation, _file_logging

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    if cfg.logging.get("rotate", False):
        _rotation = (
            int(cfg.logging.get("max_bytes", DEFAULT_MAX_BYTES)),
            int(cfg.logging.get("backup_count", DEFAULT_BACKUP_COUNT)),
        )
    # No "file" entry (built-in defaults) means console output only
    master_name = cfg.logging.get("file")
    _file_logging = bool(master_name)

    debug_enabled = bool(getattr(cfg, "debug", False))
    _effective_level = _level_for(cfg)

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False
    if _file_logging:
        base_logger.addHandler(_file_handler(_log_dir() / master_name, _effective_level))

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    if not _file_logging:
        return
    if any(getattr(h, "is_module_handler", False) for h in logger.handlers):
        return
    path = _log_dir() / f"{module_name.replace('.', '_')}.log"
    handler = _file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger wired to the project-wide handlers.

    * Module loggers (``pedigree_builder.*``) propagate to the base console +
      master log handlers and gain their own ``logs/<module>.log`` file.
    * ``debug: true`` in ``config/pedigree_builder.yml`` forces DEBUG output.
    """
    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    logger = logging.getLogger(logger_name)
    logger.setLevel(_effective_level)

    if logger_name != base_logger.name:
        _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def _root_logger() -> Logger:
    return get_logger(BASE_LOGGER_NAME)


def log_debug(message: str, *args, **kwargs) -> None:
    _root_logger().debug(message, *args, **kwargs)


def log_info(message: str, *args, **kwargs) -> None:
    _root_logger().info(message, *args, **kwargs)


def log_warning(message: str, *args, **kwargs) -> None:
    _root_logger().warning(message, *args, **kwargs)


def log_error(message: str, *args, **kwargs) -> None:
    _root_logger().error(message, *args, **kwargs)


def list_active_loggers() -> List[str]:
    """Names handed out so far; handy when debugging handler setup in tests."""
    return list(_logger_cache.keys())


def configure_logging(debug: bool | None = None) -> None:
    """Re-apply levels to every handed-out logger and its handlers.

    ``debug=True`` forces DEBUG; ``False`` forces the configured level;
    ``None`` keeps whatever ``debug`` the config says.
    """
    global _effective_level

    base_logger = _configure_base_logger()
    cfg = get_config()
    if debug is not None:
        cfg.debug = bool(debug)
    _effective_level = _level_for(cfg)

    for logger in [base_logger, *_logger_cache.values()]:
        logger.setLevel(_effective_level)
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler):
                handler.setLevel(_effective_level)
            else:
                handler.setLevel(logging.DEBUG if cfg.debug else logging.INFO)
