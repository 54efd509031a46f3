import logging
from logging.config import dictConfig

from xliff_fixer.settings import settings

_LOG_LEVEL = settings.log_level.upper()

dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "std": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "std",
        }
    },
    "root": {
        "level": _LOG_LEVEL,
        "handlers": ["console"],
    },
})

logger = logging.getLogger("xliff_fixer")
