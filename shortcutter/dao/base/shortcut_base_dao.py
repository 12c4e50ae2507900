"""Abstract base class for shortcut data access objects (DAOs).

This class establishes a consistent contract for all shortcut DAO implementations,
regardless of the underlying key-value store.

Responsibilities:
    - Provide an interface for writing and reading ShortcutEntry objects.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortcutter.models import ShortcutEntry
        >>> from shortcutter.dao import ShortcutRedisDAO

        >>> dao = ShortcutRedisDAO(...)

        >>> dao.set(ShortcutEntry(shortcut='/1a2b3c4d', target='http://example.com'))

        >>> dao.get('/1a2b3c4d').target
        'http://example.com'
"""

from abc import ABC, abstractmethod

from shortcutter.models import ShortcutEntry


class ShortcutBaseDAO(ABC):
    """Interface for shortcut data access objects (DAOs).

    Methods:
        set(entry: ShortcutEntry, **kwargs) -> ShortcutBaseDAO:
            Write a shortcut mapping. Silently overwrites an existing one.
            Raises DataStoreError on connection or write failure.

        get(shortcut: str, **kwargs) -> ShortcutEntry:
            Read a shortcut mapping.
            Raises ShortcutNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Entries never expire and are never deleted through the DAO.
    """

    @abstractmethod
    def set(self, entry: ShortcutEntry, **kwargs) -> 'ShortcutBaseDAO':
        """Write a shortcut mapping into the data store.

        Args:
            entry (ShortcutEntry):
                The mapping to store under `entry.shortcut`.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortcutBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcut: str, **kwargs) -> ShortcutEntry:
        """Retrieve a shortcut mapping from the data store.

        Args:
            shortcut (str):
                The short path, e.g. '/1a2b3c4d'.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortcutEntry: The stored mapping.

        Raises:
            ShortcutNotFoundError:
                If no mapping exists for the given shortcut.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
