"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortcutNotFoundError:
        Raised when a shortcut is not found in the data store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shortcutter.dao.exceptions import ShortcutNotFoundError
    >>> raise ShortcutNotFoundError("Shortcut '/1a2b3c4d' not found.")
    Traceback (most recent call last):
        ...
    shortcutter.dao.exceptions.ShortcutNotFoundError: Shortcut '/1a2b3c4d' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortcutNotFoundError(DAOError):
    """Exception raised when a shortcut is not found in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass
