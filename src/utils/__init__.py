"""Utility modules for the Gatehouse application."""

from src.utils.logging import get_logger, LogContext, setup_logging
from src.utils.secrets import constant_time_equals, generate_secure_key, mask_secret

__all__ = [
    # Logging
    "get_logger",
    "LogContext",
    "setup_logging",
    # Secrets
    "constant_time_equals",
    "generate_secure_key",
    "mask_secret",
]
