"""Unit tests for the ShortcutRedisDAO

Test coverage includes:

1. Initialization
   - Ensures the DAO pings Redis when constructed.

2. Write behavior
   - Validates the target URL is stored under the bare shortcut key, without TTL.
   - Validates prefixed key layout.
   - Ensures invalid types raise TypeError or BeartypeCallHintParamViolation.
   - Confirms Redis connection errors and timeouts raise DataStoreError.
   - Confirms server-side errors (READONLY, OOM) raise DataStoreError.

3. Read behavior
   - Ensures stored shortcuts come back as ShortcutEntry.
   - Confirms missing keys raise ShortcutNotFoundError.
   - Ensures byte responses are decoded.
   - Confirms Redis connection errors and WRONGTYPE replies raise DataStoreError.
"""

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation

from shortcutter.models import ShortcutEntry
from shortcutter.dao.base import ShortcutBaseDAO
from shortcutter.dao.exceptions import DataStoreError, ShortcutNotFoundError
from shortcutter.dao.redis import ShortcutRedisDAO


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def dao(redis_client):
    """Create an unprefixed ShortcutRedisDAO around a mocked client."""
    return ShortcutRedisDAO(redis_client=redis_client)


@pytest.fixture
def entry():
    return ShortcutEntry(shortcut='/1a2b3c4d', target='http://example.com')


# -------------------------------
# 1. Initialization
# -------------------------------


def test_dao_implements_base_interface(dao):
    assert isinstance(dao, ShortcutBaseDAO)


def test_initialization_pings_redis(redis_client):
    """Ensure constructing the DAO healthchecks Redis."""
    ShortcutRedisDAO(redis_client=redis_client)
    redis_client.ping.assert_called_once()


# -------------------------------
# 2. Write behavior
# -------------------------------


def test_set_stores_target_under_shortcut_key(dao, redis_client, entry):
    """Ensure the target URL is SET under the bare shortcut path, with no expiry."""
    result = dao.set(entry)

    assert result is dao
    redis_client.set.assert_called_once_with('/1a2b3c4d', 'http://example.com')


def test_set_with_prefix(redis_client, app_prefix, entry):
    """Ensure a configured prefix namespaces the shortcut key."""
    dao = ShortcutRedisDAO(redis_client=redis_client, prefix=app_prefix)
    dao.set(entry)
    redis_client.set.assert_called_once_with('testapp:test:/1a2b3c4d', 'http://example.com')


def test_set_overwrites_silently(dao, redis_client):
    """Ensure writing the same shortcut twice issues two unconditional SETs."""
    dao.set(ShortcutEntry(shortcut='/1a2b3c4d', target='http://first.com'))
    dao.set(ShortcutEntry(shortcut='/1a2b3c4d', target='http://second.com'))

    assert redis_client.set.call_count == 2
    redis_client.exists.assert_not_called()
    redis_client.set.assert_called_with('/1a2b3c4d', 'http://second.com')


def test_set_with_invalid_type(dao):
    """Ensure writing invalid types raises TypeError or Beartype error."""
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.set('http://example.com/notanentry')


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('Connection error'), redis.exceptions.TimeoutError('Timeout')])
def test_set_with_redis_connection_error(dao, redis_client, entry, error):
    """Ensure Redis connectivity errors during SET raise DataStoreError."""
    redis_client.set.side_effect = error

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.set(entry)


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ReadOnlyError("READONLY You can't write against a read only replica."),
        redis.exceptions.OutOfMemoryError("OOM command not allowed when used memory > 'maxmemory'."),
    ],
)
def test_set_with_redis_server_error(dao, redis_client, entry, error):
    """Ensure server-side errors during SET raise DataStoreError with the server message."""
    redis_client.set.side_effect = error

    with pytest.raises(DataStoreError, match='Redis at redis.test:6379/0 failed') as excinfo:
        dao.set(entry)

    assert str(error) in str(excinfo.value)


# -------------------------------
# 3. Read behavior
# -------------------------------


def test_get_shortcut(dao, redis_client):
    """Ensure an existing shortcut is returned as a ShortcutEntry."""
    redis_client.get.return_value = 'https://example.org'

    entry = dao.get('/ab12CD')

    assert entry == ShortcutEntry(shortcut='/ab12CD', target='https://example.org')
    redis_client.get.assert_called_once_with('/ab12CD')


def test_get_shortcut_with_prefix(redis_client, app_prefix):
    redis_client.get.return_value = 'https://example.org'
    dao = ShortcutRedisDAO(redis_client=redis_client, prefix=app_prefix)

    assert dao.get('/ab12CD').target == 'https://example.org'
    redis_client.get.assert_called_once_with('testapp:test:/ab12CD')


def test_get_decodes_bytes(dao, redis_client):
    """Ensure clients created without decode_responses still yield str targets."""
    redis_client.get.return_value = b'http://example.com'
    assert dao.get('/1a2b3c4d').target == 'http://example.com'


def test_get_shortcut_which_does_not_exist(dao, redis_client):
    """Ensure missing shortcuts raise ShortcutNotFoundError."""
    redis_client.get.return_value = None

    with pytest.raises(ShortcutNotFoundError, match="Shortcut '/zzzzzzzz' not found"):
        dao.get('/zzzzzzzz')


def test_get_shortcut_with_invalid_type(dao):
    """Ensure invalid shortcut types raise TypeError or Beartype error."""
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        dao.get(12345)


def test_get_shortcut_with_redis_connection_error(dao, redis_client):
    """Ensure Redis connection errors during GET raise DataStoreError."""
    redis_client.get.side_effect = redis.exceptions.ConnectionError('Connection Error')

    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        dao.get('/1a2b3c4d')


def test_get_shortcut_with_wrong_type(dao, redis_client):
    """Ensure a WRONGTYPE reply during GET raises DataStoreError."""
    redis_client.get.side_effect = redis.exceptions.ResponseError('WRONGTYPE Operation against a key holding the wrong kind of value')

    with pytest.raises(DataStoreError, match='WRONGTYPE'):
        dao.get('/1a2b3c4d')
