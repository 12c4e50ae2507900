"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` at process start (see `shortcutter.__main__`)
before any other logging is done. Werkzeug's request lines go through the same
root handler, so the whole process writes one JSON object per line on stdout:

{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "shortcutter.web.app",
    "message": "Shortcut created.",
    "event": "SHORTCUT_CREATED",
    "shortcut": "/46d02e47"
}

Request-scoped fields (`event`, `shortcut`, `url`, `store`, ...) are passed
through `extra=` and appear as top-level keys.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortcutter.constants import ENV


# Attributes every LogRecord carries, plus the two Formatter.format() adds
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, `extra` fields promoted to top-level keys"""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)

        log = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update({key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS})

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Unserializable extras (exceptions, paths, ...) fall back to str()
        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> None:
    """Route all logging to stdout through JsonFormatter

    Args:
        level (str | None):
            Root log level. Falls back to `LOG_LEVEL`, then 'INFO'.
    """
    log_level = (level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {'()': JsonFormatter},
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {'level': log_level, 'handlers': ['stdout']},
        }
    )
