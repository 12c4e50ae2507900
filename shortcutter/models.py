from dataclasses import dataclass
from typing import Self


# fmt: off
@dataclass(frozen=True)
class ShortcutEntry:
    shortcut: str                       # Short path, e.g. '/1a2b3c4d' (store key)
    target: str                         # Destination URL, always carries an http(s) scheme
# fmt: on


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a single homepage request, handed to the template.

    At most one of `shortcut` and `error` is set. Neither is set for the
    empty-state homepage.

    Attributes:
        shortcut (str | None):
            Fully-qualified short link, e.g. 'localhost:8080/1a2b3c4d'.
        error (str | None):
            Human-readable failure description.

    Example:
        >>> SubmissionResult.success('localhost:8080/1a2b3c4d').ok
        True
        >>> SubmissionResult.failure('Invalid url input').error
        'Invalid url input'
        >>> SubmissionResult.empty().is_empty
        True
    """

    shortcut: str | None = None
    error: str | None = None

    def __post_init__(self):
        if self.shortcut is not None and self.error is not None:
            raise ValueError('A submission result carries either a shortcut or an error, not both.')

    @classmethod
    def success(cls, shortcut: str) -> Self:
        return cls(shortcut=shortcut)

    @classmethod
    def failure(cls, error: str) -> Self:
        return cls(error=error)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @property
    def ok(self) -> bool:
        return self.shortcut is not None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def is_empty(self) -> bool:
        return not self.ok and not self.failed
