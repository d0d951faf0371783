"""Exception classes for the MIME database."""

from typing import Any


class MimeDbError(Exception):
    """Base exception for MIME database errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def __str__(self) -> str:
        if self.data:
            return f"{self.message}: {self.data}"
        return self.message


class DatasetMalformed(MimeDbError):
    """The bundled dataset could not be parsed into MIME type -> extensions."""

    pass


class DatasetUnreadable(DatasetMalformed):
    """The dataset resource could not be read at all."""

    pass


class DatasetUnavailable(MimeDbError):
    """The dataset failed to load and no lookups can succeed."""

    pass


class UsageError(MimeDbError):
    """Command-line usage error."""

    pass
