"""Exception hierarchy for the players API.

    PlayersApiError
    +-- ConstraintViolation  (uniqueness / integrity rule rejected a write)
    +-- StorageFailure       (any other datastore error)

"Not found" is not an exception: lookups return ``None``.
"""


class PlayersApiError(Exception):
    def __init__(self, message: str = "An unexpected error occurred") -> None:
        self._message = message
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message


class ConstraintViolation(PlayersApiError):
    """Raised when the store rejects a write that breaks id or squad number uniqueness."""

    def __init__(self, message: str = "Player violates a uniqueness constraint") -> None:
        super().__init__(message)


class StorageFailure(PlayersApiError):
    """Raised for connectivity, SQL or I/O errors in the storage layer."""

    def __init__(self, message: str = "Player storage failed") -> None:
        super().__init__(message)
