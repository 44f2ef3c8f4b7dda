"""
Settings for crawl-paginators.

Values are read from the environment (a .env file is loaded if present).
"""

import logging.config
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# Default number of additional pages when a site rule gives no max_pages
PAGINATION_MAX_PAGES = int(os.getenv('PAGINATION_MAX_PAGES', '10'))

# Raise instead of stopping when a page parameter is not a number
PAGINATION_STRICT_NUMERIC = _env_bool('PAGINATION_STRICT_NUMERIC', False)

PAGINATION_LOG_LEVEL = os.getenv('PAGINATION_LOG_LEVEL', 'INFO').upper()

# Logging
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'crawl_paginators': {
            'handlers': ['console'],
            'level': PAGINATION_LOG_LEVEL,
            'propagate': False,
        },
    },
}


def configure_logging(config: dict | None = None) -> None:
    """Apply LOGGING (or the given dictConfig) to the package loggers."""
    logging.config.dictConfig(config or LOGGING)
