"""Data Access Object (DAO) implementation for managing shortcuts in Redis

This module provides a Redis-based implementation of ShortcutBaseDAO. Each
shortcut is a plain Redis string: the key is the short path (optionally
namespaced by a prefix), the value is the destination URL. Keys carry no TTL.

Classes:
    ShortcutRedisDAO:
        DAO for storing and retrieving ShortcutEntry in a Redis datastore.

Example:
    >>> from shortcutter.models import ShortcutEntry
    >>> from shortcutter.dao.redis import ShortcutRedisDAO

    >>> dao = ShortcutRedisDAO(redis_host='localhost')
    >>> dao.set(ShortcutEntry(shortcut='/1a2b3c4d', target='http://example.com'))
    <ShortcutRedisDAO>

    >>> dao.get('/1a2b3c4d').target
    'http://example.com'
"""

from beartype import beartype

from shortcutter.models import ShortcutEntry
from shortcutter.dao.base import ShortcutBaseDAO
from shortcutter.dao.redis.mixins import RedisClientMixin
from shortcutter.dao.redis.helpers import handle_redis_connection_error
from shortcutter.dao.exceptions import ShortcutNotFoundError


class ShortcutRedisDAO(RedisClientMixin, ShortcutBaseDAO):
    """Redis-based Data Access Object (DAO) for managing shortcut mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating (optionally namespaced) Redis keys.
    """

    @handle_redis_connection_error
    @beartype
    def set(self, entry: ShortcutEntry, **kwargs) -> 'ShortcutRedisDAO':
        """SET the destination URL under the shortcut key

        NOTE: the write is unconditional. An existing mapping under the same
              shortcut is overwritten (last write wins).

        Raises:
            DataStoreError:
                If a Redis connection issue occurs.
        """
        self.redis.set(self.keys.shortcut_key(entry.shortcut), entry.target)
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcut: str, **kwargs) -> ShortcutEntry:
        """GET the destination URL stored under the shortcut key

        Raises:
            ShortcutNotFoundError:
                If the shortcut does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        target = self.redis.get(self.keys.shortcut_key(shortcut))
        if target is None:
            raise ShortcutNotFoundError(f"Shortcut '{shortcut}' not found.")

        # Clients created without decode_responses hand back bytes
        if isinstance(target, bytes):
            target = target.decode('utf-8')

        return ShortcutEntry(shortcut=shortcut, target=target)
