"""
Logging configuration for redisesh
"""

import logging
import logging.config
from typing import Any, Dict


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the redisesh loggers."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout"
            }
        },
        "loggers": {
            "redisesh": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "redis": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        }
    }


def configure_logging(level: str = "INFO") -> None:
    """Apply the redisesh logging configuration."""
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"Unknown log level: {level}")
    logging.config.dictConfig(get_logging_config(level))
