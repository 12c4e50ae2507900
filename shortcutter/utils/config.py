"""Utility functions for application configuration management.

Configuration is resolved once at startup into a plain dictionary with two
sections, layered from lowest to highest precedence:

    1. Built-in defaults (see `shortcutter.constants.Defaults`)
    2. A YAML file:
         - the path given explicitly to `load_config()`, else
         - the path in `CONFIG_FILE`, else
         - `<project root>/config/<app env>.yml` when it exists
    3. Environment variables (`REDIS_*`, `LISTEN_HOST`, `LISTEN_PORT`, `PUBLIC_DOMAIN`)

`redis.key_prefix` namespaces stored keys as `<prefix>:/xxxxxxxx`. It is unset by
default, so stored keys are the bare short paths.

The resulting document follows this structure:

    {
        "redis": {
            "host": "localhost",
            "port": 6379,
            "db": 0,
            "username": null,
            "password": null,
            "key_prefix": null
        },
        "server": {
            "host": "0.0.0.0",
            "port": 8080,
            "domain": "localhost:8080"
        }
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(path: str | Path | None = None) -> dict
        Resolve the application configuration.

    redis_kwargs(config: dict) -> dict
        Map the redis connection options onto `redis_*` DAO keyword arguments.

Example:
    >>> from shortcutter.utils.config import load_config, redis_kwargs
    >>> config = load_config()
    >>> config['server']['domain']
    'localhost:8080'
    >>> redis_kwargs(config)['redis_host']
    'localhost'
"""

import os
import copy
import logging
from pathlib import Path

import yaml

from shortcutter.types import AppConfig, RedisConfig
from shortcutter.constants import ENV, Defaults
from shortcutter.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


DEFAULT_CONFIG: AppConfig = {
    'redis': {
        'host': Defaults.REDIS_HOST,
        'port': Defaults.REDIS_PORT,
        'db': Defaults.REDIS_DB,
        'username': None,
        'password': None,
        'key_prefix': None,
    },
    'server': {
        'host': Defaults.LISTEN_HOST,
        'port': Defaults.LISTEN_PORT,
        'domain': Defaults.PUBLIC_DOMAIN,
    },
}

# (section, key) pairs overridable from the environment
ENV_OVERRIDES = {
    ENV.Redis.HOST: ('redis', 'host'),
    ENV.Redis.PORT: ('redis', 'port'),
    ENV.Redis.DB: ('redis', 'db'),
    ENV.Redis.USERNAME: ('redis', 'username'),
    ENV.Redis.PASSWORD: ('redis', 'password'),
    ENV.Redis.KEY_PREFIX: ('redis', 'key_prefix'),
    ENV.Server.HOST: ('server', 'host'),
    ENV.Server.PORT: ('server', 'port'),
    ENV.Server.DOMAIN: ('server', 'domain'),
}

# (section, key) pairs which must hold non-negative integers
INTEGER_OPTIONS = (('redis', 'port'), ('redis', 'db'), ('server', 'port'))


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def project_root() -> Path:
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def _config_file(path: str | Path | None) -> Path | None:
    """Pick the YAML file to load, None if there's nothing to load

    Raises:
        BadConfigurationError:
            If a file was requested explicitly (argument or CONFIG_FILE) but doesn't exist.
    """
    requested = path or os.environ.get(ENV.App.CONFIG_FILE)
    if requested:
        requested = Path(requested)
        if not requested.is_file():
            raise BadConfigurationError(f'Configuration file {requested} does not exist.')
        return requested

    fallback = project_root() / 'config' / f'{app_env()}.yml'
    return fallback if fallback.is_file() else None


def _read_yaml(path: Path) -> AppConfig:
    with path.open('r', encoding='utf-8') as f:
        document = yaml.safe_load(f) or {}

    if not isinstance(document, dict):
        raise BadConfigurationError(f'Configuration file {path} must contain a mapping (got {type(document).__name__}).')
    return document


def _coerce_int(section: str, key: str, value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise BadConfigurationError(f'{section}.{key} must be an integer (given value: {value!r}).') from None
    if number < 0:
        raise BadConfigurationError(f'{section}.{key} must be >= 0 (given value: {number}).')
    return number


def load_config(path: str | Path | None = None) -> AppConfig:
    """Resolve the application configuration

    Args:
        path (str | Path | None):
            Optional YAML configuration file. Takes precedence over `CONFIG_FILE`.

    Returns:
        dict: The resolved configuration document.

    Raises:
        BadConfigurationError:
            If the configuration file is missing (when requested explicitly),
            malformed, or carries invalid values.

    Example:
        >>> os.environ['PUBLIC_DOMAIN'] = 'sho.rt'
        >>> load_config()['server']['domain']
        'sho.rt'
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    config_file = _config_file(path)
    if config_file is not None:
        logger.debug('Loading configuration file.', extra={'configFile': str(config_file)})
        document = _read_yaml(config_file)
        for section, defaults in config.items():
            overrides = document.get(section) or {}
            if not isinstance(overrides, dict):
                raise BadConfigurationError(f"Section '{section}' in {config_file} must be a mapping.")
            defaults.update({k: v for k, v in overrides.items() if k in defaults})

    for variable, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(variable)
        if value:
            config[section][key] = value

    for section, key in INTEGER_OPTIONS:
        config[section][key] = _coerce_int(section, key, config[section][key])

    prefix = config['redis']['key_prefix']
    if prefix is not None and not isinstance(prefix, str):
        raise BadConfigurationError(f'redis.key_prefix must be a string (given value: {prefix!r}).')
    config['redis']['key_prefix'] = prefix or None

    return config


def redis_kwargs(config: AppConfig) -> RedisConfig:
    """Map the redis connection options onto RedisClientMixin keyword arguments

    `key_prefix` is not a connection option; it is passed to the DAO as `prefix`.

    Example:
        >>> redis_kwargs({'redis': {'host': 'redis', 'port': 6379}})
        {'redis_host': 'redis', 'redis_port': 6379}
    """
    return {f'redis_{k}': v for k, v in config['redis'].items() if k != 'key_prefix'}
