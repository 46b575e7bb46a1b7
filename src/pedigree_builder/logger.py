"""
Short import path for the logging package.

    from pedigree_builder.logger import get_logger
"""

from pedigree_builder.logging import (
    configure_logging,
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_warning,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
]
