from .config import settings, setup_logging
from .exceptions import (
    custom_http_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)


__all__ = [
    "settings",
    "setup_logging",
    "custom_http_exception_handler",
    "validation_exception_handler",
    "unhandled_exception_handler",
]
