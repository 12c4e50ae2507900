from shortcutter.dao.base import ShortcutBaseDAO
from shortcutter.dao.redis import ShortcutRedisDAO
from shortcutter.dao.exceptions import DAOError, DataStoreError, ShortcutNotFoundError


__all__ = [
    'ShortcutBaseDAO',
    'ShortcutRedisDAO',
    'DAOError',
    'DataStoreError',
    'ShortcutNotFoundError',
]
