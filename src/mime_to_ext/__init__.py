"""
mime_to_ext - lookup between MIME types and file extensions.

The bundled dataset is parsed once on first use; the extension index is
built once on the first extension lookup.
"""

from .dataset import DatasetLoader, LoadOutcome, LoadState, parse_document
from .exceptions import (
    DatasetMalformed,
    DatasetUnavailable,
    DatasetUnreadable,
    MimeDbError,
    UsageError,
)
from .lookup import (
    MimeDatabase,
    build_reverse_index,
    db_status,
    ext_to_mime,
    extension_to_mime,
    get_database,
    is_available,
    mime_to_ext,
    mime_to_extensions,
    mime_to_preferred_extension,
    status,
)

__version__ = "0.1.0"
__all__ = [
    # Lookups
    "mime_to_extensions",
    "mime_to_preferred_extension",
    "extension_to_mime",
    "status",
    "is_available",
    "mime_to_ext",
    "ext_to_mime",
    "db_status",
    # Engine
    "MimeDatabase",
    "get_database",
    "build_reverse_index",
    # Dataset
    "DatasetLoader",
    "LoadOutcome",
    "LoadState",
    "parse_document",
    # Errors
    "MimeDbError",
    "DatasetMalformed",
    "DatasetUnavailable",
    "DatasetUnreadable",
    "UsageError",
]
