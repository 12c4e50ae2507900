"""Shortcut creation and resolution.

Classes:
    URLShortener:
        Interface with the two operations the web layer relies on.

    ShortcutService:
        URLShortener backed by a ShortcutBaseDAO. Built once at startup and
        shared (read-only) by every request.

Example:
    >>> service = ShortcutService(dao=ShortcutRedisDAO(), domain='localhost:8080')
    >>> service.create_new_shortcut('example.com')
    '/46d02e47'
    >>> service.short_link('/46d02e47')
    'localhost:8080/46d02e47'
    >>> service.check_shortcut('/46d02e47')
    'http://example.com'
"""

import random
import logging
from abc import ABC, abstractmethod

from shortcutter.constants import Message
from shortcutter.models import ShortcutEntry
from shortcutter.dao.base import ShortcutBaseDAO
from shortcutter.dao.exceptions import DataStoreError, ShortcutNotFoundError
from shortcutter.exceptions import InvalidPathError, InvalidURLError
from shortcutter.utils.helpers import join_short_link
from shortcutter.utils.shortener import generate_shortcut
from shortcutter.utils.validators import normalize_url, validate_path, validate_url


logger = logging.getLogger(__name__)


class URLShortener(ABC):
    """Create shortcuts for URLs and resolve shortcuts back to URLs."""

    @abstractmethod
    def create_new_shortcut(self, url: str) -> str:
        """Create and persist a shortcut for `url`, returning the short path.

        Raises:
            InvalidURLError: If `url` fails validation.
            DataStoreError: If the mapping can't be written.
        """
        pass

    @abstractmethod
    def check_shortcut(self, path: str) -> str:
        """Resolve a short path to its destination URL.

        Raises:
            InvalidPathError: If `path` fails validation.
            ShortcutNotFoundError: If there's no mapping for `path`.
        """
        pass


class ShortcutService(URLShortener):
    """URLShortener persisting mappings through a DAO

    Attributes:
        dao (ShortcutBaseDAO):
            Mapping store shared by all requests.
        domain (str):
            Public-facing domain prepended to shortcuts, e.g. 'localhost:8080'.
        rng (random.Random):
            Random source for shortcut perturbation.
    """

    def __init__(self, dao: ShortcutBaseDAO, domain: str, rng: random.Random | None = None):
        self.dao = dao
        self.domain = domain
        self.rng = rng or random.Random()

    def create_new_shortcut(self, url: str) -> str:
        if not validate_url(url):
            raise InvalidURLError(Message.INVALID_URL_INPUT)

        shortcut = generate_shortcut(url, rng=self.rng)
        entry = ShortcutEntry(shortcut=shortcut, target=normalize_url(url))
        self.dao.set(entry)

        logger.debug('Stored shortcut mapping.', extra={'shortcut': shortcut, 'target': entry.target})
        return shortcut

    def check_shortcut(self, path: str) -> str:
        if not validate_path(path):
            raise InvalidPathError(Message.URL_BAD_FORMATTED)

        # An unreachable store reads as a missing shortcut
        try:
            entry = self.dao.get(path)
        except DataStoreError:
            logger.warning('Mapping store unavailable during lookup.', exc_info=True, extra={'shortcut': path})
            raise ShortcutNotFoundError(Message.SHORTCUT_NOT_FOUND) from None
        except ShortcutNotFoundError:
            raise ShortcutNotFoundError(Message.SHORTCUT_NOT_FOUND) from None

        return entry.target

    def short_link(self, shortcut: str) -> str:
        return join_short_link(self.domain, shortcut)
