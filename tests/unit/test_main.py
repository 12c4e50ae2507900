"""Unit tests for the CLI entry point in __main__.py"""

from unittest.mock import MagicMock, patch

import pytest
from pytest import MonkeyPatch

from shortcutter.__main__ import apply_overrides, build_parser, main
from shortcutter.constants import ENV
from shortcutter.dao.exceptions import DataStoreError
from shortcutter.utils.config import DEFAULT_CONFIG, ENV_OVERRIDES


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: MonkeyPatch, tmp_path):
    for variable in ENV_OVERRIDES:
        monkeypatch.delenv(variable, raising=False)
    for variable in (ENV.App.APP_ENV, ENV.App.CONFIG_FILE):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setenv(ENV.App.PROJECT_ROOT, str(tmp_path))


@pytest.fixture
def patched():
    with (
        patch('shortcutter.__main__.initialize_logging') as initialize_logging,
        patch('shortcutter.__main__.ShortcutRedisDAO') as dao_cls,
        patch('shortcutter.__main__.create_app') as create_app,
    ):
        create_app.return_value = MagicMock()
        yield {'initialize_logging': initialize_logging, 'dao_cls': dao_cls, 'create_app': create_app}


def test_main_serves_app(patched):
    exit_code = main(['--port', '9090', '--domain', 'sho.rt', '--redis-host', 'redis-server'])

    assert exit_code == 0
    patched['initialize_logging'].assert_called_once_with(None)
    patched['dao_cls'].assert_called_once_with(
        redis_host='redis-server',
        redis_port=6379,
        redis_db=0,
        redis_username=None,
        redis_password=None,
        prefix=None,
    )

    service, config = patched['create_app'].call_args.args
    assert service.domain == 'sho.rt'
    assert service.dao is patched['dao_cls'].return_value
    assert config['server']['port'] == 9090

    patched['create_app'].return_value.run.assert_called_once_with(host='0.0.0.0', port=9090, debug=False)


def test_main_key_prefix_and_debug(patched):
    assert main(['--key-prefix', 'shortcutter:prod', '--debug']) == 0

    patched['initialize_logging'].assert_called_once_with('DEBUG')
    assert patched['dao_cls'].call_args.kwargs['prefix'] == 'shortcutter:prod'
    assert 'redis_key_prefix' not in patched['dao_cls'].call_args.kwargs
    patched['create_app'].return_value.run.assert_called_once_with(host='0.0.0.0', port=8080, debug=True)


def test_main_store_unreachable(patched):
    patched['dao_cls'].side_effect = DataStoreError("Can't connect to Redis at localhost:6379/0.")

    assert main([]) == 1
    patched['create_app'].assert_not_called()


def test_main_bad_configuration(patched, tmp_path):
    assert main(['--config', str(tmp_path / 'missing.yml')]) == 1
    patched['dao_cls'].assert_not_called()


def test_apply_overrides_only_given_flags():
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    args = build_parser().parse_args(['--host', '127.0.0.1', '--redis-db', '2'])

    result = apply_overrides(config, args)

    assert result['server']['host'] == '127.0.0.1'
    assert result['server']['port'] == 8080
    assert result['redis']['db'] == 2
    assert result['redis']['host'] == 'localhost'
    assert result['redis']['key_prefix'] is None


@pytest.mark.parametrize('port', ['abc', '-1'])
def test_invalid_port_flag(port):
    with pytest.raises(SystemExit):
        build_parser().parse_args(['--port', port])
