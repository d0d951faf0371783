"""Bidirectional lookup between MIME types and file extensions."""

from collections.abc import Mapping
from types import MappingProxyType

from src.logging import get_logger

from .dataset import DatasetLoader, ForwardMapping
from .exceptions import DatasetUnavailable
from .once import Lazy

logger = get_logger(__name__)

ReverseMapping = Mapping[str, str]


def build_reverse_index(forward: ForwardMapping) -> ReverseMapping:
    """
    Invert a forward mapping into extension -> MIME type.

    When several MIME types list the same extension, the one that appears
    first in the dataset keeps it.

    Args:
        forward: MIME type -> extensions, in document order.

    Returns:
        Read-only mapping of extension to MIME type.
    """
    reverse: dict[str, str] = {}
    collisions = 0
    for mime, extensions in forward.items():
        for ext in extensions:
            if ext in reverse:
                collisions += 1
                continue
            reverse[ext] = mime

    logger.debug(f"Built extension index with {len(reverse)} entries ({collisions} shadowed)")
    return MappingProxyType(reverse)


class MimeDatabase:
    """
    Query engine over a dataset loader.

    The forward mapping comes from the loader; the reverse mapping is built
    from it the first time an extension is looked up.
    """

    def __init__(self, loader: DatasetLoader | None = None):
        """
        Initialize the database.

        Args:
            loader: Dataset loader to query. Defaults to the bundled dataset.
        """
        self._loader = loader or DatasetLoader()
        self._reverse: Lazy[ReverseMapping | None] = Lazy(self._build_reverse)

    def _forward(self) -> ForwardMapping | None:
        return self._loader.load().mapping

    def _build_reverse(self) -> ReverseMapping | None:
        forward = self._forward()
        if forward is None:
            return None
        return build_reverse_index(forward)

    def mime_to_extensions(self, mime: str) -> tuple[str, ...] | None:
        """
        Get all extensions registered for a MIME type.

        Args:
            mime: MIME type, e.g. ``audio/mpeg``.

        Returns:
            Extensions in dataset order (empty if the entry lists none),
            or None if the MIME type is unknown or the dataset is unavailable.
        """
        forward = self._forward()
        if forward is None:
            return None
        return forward.get(mime)

    def mime_to_preferred_extension(self, mime: str) -> str | None:
        """Get the first extension listed for a MIME type, or None."""
        extensions = self.mime_to_extensions(mime)
        if not extensions:
            return None
        return extensions[0]

    def extension_to_mime(self, ext: str) -> str | None:
        """
        Get the canonical MIME type for an extension.

        The extension must match the dataset exactly: lower case, no dot.

        Args:
            ext: File extension, e.g. ``png``.

        Returns:
            The MIME type, or None if the extension is unknown or the dataset
            is unavailable.
        """
        reverse = self._reverse.get()
        if reverse is None:
            return None
        return reverse.get(ext)

    def status(self) -> None:
        """
        Check that the dataset loaded.

        Raises:
            DatasetUnavailable: If the dataset failed to load.
        """
        outcome = self._loader.load()
        if not outcome.ok:
            raise DatasetUnavailable("MIME database unavailable") from outcome.error

    def is_available(self) -> bool:
        """Whether the dataset loaded."""
        return self._loader.load().ok

    @property
    def reverse_index_built(self) -> bool:
        """Whether the extension index has been built."""
        return self._reverse.initialized


_default = MimeDatabase()


def get_database() -> MimeDatabase:
    """Get the process-wide database over the bundled dataset."""
    return _default


def mime_to_extensions(mime: str) -> tuple[str, ...] | None:
    """Get all extensions for a MIME type from the bundled dataset."""
    return _default.mime_to_extensions(mime)


def mime_to_preferred_extension(mime: str) -> str | None:
    """Get the preferred extension for a MIME type from the bundled dataset."""
    return _default.mime_to_preferred_extension(mime)


def extension_to_mime(ext: str) -> str | None:
    """Get the MIME type for an extension from the bundled dataset."""
    return _default.extension_to_mime(ext)


def status() -> None:
    """Raise DatasetUnavailable if the bundled dataset failed to load."""
    _default.status()


def is_available() -> bool:
    """Whether the bundled dataset loaded."""
    return _default.is_available()


# Short names
mime_to_ext = mime_to_preferred_extension
ext_to_mime = extension_to_mime
db_status = status
