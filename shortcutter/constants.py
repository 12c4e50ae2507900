from enum import StrEnum


# Upper bound (exclusive) of the random draw appended to a URL before hashing
MAX_RANDOM_NUMBER = 1_000_000

# Scheme prepended to submitted URLs which don't carry one
DEFAULT_SCHEME = 'http://'


class Defaults:
    """Built-in configuration values."""

    REDIS_HOST = 'localhost'
    REDIS_PORT = 6379
    REDIS_DB = 0
    LISTEN_HOST = '0.0.0.0'  # noqa: S104
    LISTEN_PORT = 8080
    PUBLIC_DOMAIN = 'localhost:8080'


class Message:
    """Human-readable errors rendered on the homepage."""

    INVALID_URL_INPUT = 'Invalid url input'
    URL_BAD_FORMATTED = 'Url bad formatted'
    SHORTCUT_NOT_FOUND = 'Shortcut not found'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_FILE = 'CONFIG_FILE'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105
        KEY_PREFIX = 'REDIS_KEY_PREFIX'

    class Server(StrEnum):
        HOST = 'LISTEN_HOST'
        PORT = 'LISTEN_PORT'
        DOMAIN = 'PUBLIC_DOMAIN'


class Event(StrEnum):
    """Event codes attached to request log records."""

    SHORTCUT_CREATED = 'SHORTCUT_CREATED'
    INVALID_URL_INPUT = 'INVALID_URL_INPUT'
    STORE_WRITE_FAILED = 'STORE_WRITE_FAILED'
    SHORTCUT_NOT_FOUND = 'SHORTCUT_NOT_FOUND'
    URL_BAD_FORMATTED = 'URL_BAD_FORMATTED'
    REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
    HOMEPAGE_RENDERED = 'HOMEPAGE_RENDERED'
    UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
