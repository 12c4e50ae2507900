from shortcutter.dao.redis.redis_key_schema import RedisKeySchema
from shortcutter.dao.redis.mixins import RedisClientMixin
from shortcutter.dao.redis.shortcut_redis_dao import ShortcutRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortcutRedisDAO',
]
