"""
Centralised logging configuration.

Library modules only create named loggers under the ``identity_core``
namespace; nothing is configured on import. Applications that want the
package's default handler call :func:`setup_logging` once at startup.

    from identity_core.core.logger import setup_logging
    setup_logging()
"""

import logging
import logging.config
from typing import Optional

from identity_core.core.config import settings

LOGGER_NAME = "identity_core"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Apply a console logging configuration for the ``identity_core`` loggers.

    Args:
        level: Log level name, defaults to ``settings.LOG_LEVEL``
        fmt: Log record format, defaults to ``settings.LOG_FORMAT``

    Returns:
        The package root logger
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": fmt or settings.LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["console"],
                "level": (level or settings.LOG_LEVEL).upper(),
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(config)
    return logging.getLogger(LOGGER_NAME)
