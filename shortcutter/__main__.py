"""Run the shortcutter web service.

CLI usage:
    # Defaults (or config/<APP_ENV>.yml, or environment variables)
    $ python -m shortcutter

    # Explicit configuration file and overrides
    $ python -m shortcutter \
        --config config/local.yml \
        --port 8080 \
        --domain sho.rt \
        --redis-host redis-server --redis-port 6379 \
        --key-prefix shortcutter:prod

Behavior:
    - Initializes JSON logging (DEBUG with --debug).
    - Resolves configuration: defaults < YAML file < environment < CLI flags.
    - Connects to Redis and PINGs it. An unreachable store aborts startup (exit code 1).
    - Builds the shortener service and serves the Flask app on the listen host/port.
"""

import sys
import argparse
import logging

from shortcutter.dao.exceptions import DataStoreError
from shortcutter.dao.redis import ShortcutRedisDAO
from shortcutter.exceptions import ConfigurationError
from shortcutter.service import ShortcutService
from shortcutter.types import AppConfig
from shortcutter.utils import initialize_logging, load_config, redis_kwargs
from shortcutter.web import create_app


logger = logging.getLogger('shortcutter')


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value!r} is not an integer') from None
    if number < 0:
        raise argparse.ArgumentTypeError(f'{value!r} must be >= 0')
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shortcutter',
        description='URL shortening web service backed by Redis',
    )
    parser.add_argument('--config', default=None, help='YAML configuration file (default: $CONFIG_FILE or config/<APP_ENV>.yml)')
    parser.add_argument('--host', default=None, help='Listen host (default: 0.0.0.0)')
    parser.add_argument('--port', type=_non_negative_int, default=None, help='Listen port (default: 8080)')
    parser.add_argument('--domain', default=None, help='Public-facing domain prepended to shortcuts (default: localhost:8080)')
    parser.add_argument('--redis-host', default=None, help='Redis host (default: localhost)')
    parser.add_argument('--redis-port', type=_non_negative_int, default=None, help='Redis port (default: 6379)')
    parser.add_argument('--redis-db', type=_non_negative_int, default=None, help='Redis DB index (default: 0)')
    parser.add_argument('--key-prefix', default=None, help='Namespace for stored keys, e.g. shortcutter:prod (default: none, keys are bare short paths)')
    parser.add_argument('--debug', action='store_true', help='Run Flask in debug mode')
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Overlay CLI flags which were actually given on top of the resolved config"""
    # fmt: off
    overrides = {
        ('server', 'host'):      args.host,
        ('server', 'port'):      args.port,
        ('server', 'domain'):    args.domain,
        ('redis', 'host'):       args.redis_host,
        ('redis', 'port'):       args.redis_port,
        ('redis', 'db'):         args.redis_db,
        ('redis', 'key_prefix'): args.key_prefix,
    }
    # fmt: on
    for (section, key), value in overrides.items():
        if value is not None:
            config[section][key] = value
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Steps:
        - Parse CLI arguments
        - Initialize logging and resolve configuration
        - Connect to Redis (fatal on failure)
        - Build service and Flask app, then serve

    Returns:
        int: process exit code
    """
    args = build_parser().parse_args(argv)
    initialize_logging('DEBUG' if args.debug else None)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigurationError:
        logger.exception('Invalid configuration. Aborting startup.')
        return 1

    try:
        dao = ShortcutRedisDAO(**redis_kwargs(config), prefix=config['redis']['key_prefix'])
    except DataStoreError:
        logger.exception('Mapping store unreachable. Aborting startup.')
        return 1

    service = ShortcutService(dao=dao, domain=config['server']['domain'])
    app = create_app(service, config)

    server = config['server']
    logger.info('Starting shortcutter.', extra={'host': server['host'], 'port': server['port'], 'domain': server['domain']})
    app.run(host=server['host'], port=server['port'], debug=args.debug)
    return 0


if __name__ == '__main__':
    sys.exit(main())
