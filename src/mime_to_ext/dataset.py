"""Loading of the bundled MIME type -> extensions dataset."""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from importlib import resources
from types import MappingProxyType
from typing import Any

from src.logging import get_logger

from .exceptions import DatasetMalformed, DatasetUnreadable
from .once import Lazy

logger = get_logger(__name__)

DATASET_RESOURCE = "data/mime_db.json"

ForwardMapping = Mapping[str, tuple[str, ...]]
DatasetSource = str | bytes | Callable[[], str | bytes]


class LoadState(Enum):
    """State of a dataset load."""

    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class LoadOutcome:
    """
    Result of loading the dataset.

    Attributes:
        state: Whether the load is pending, succeeded or failed.
        mapping: Forward mapping, present only when loaded.
        error: The parse error, present only when failed.
    """

    state: LoadState
    mapping: ForwardMapping | None = None
    error: DatasetMalformed | None = None

    @property
    def ok(self) -> bool:
        """Whether the dataset loaded successfully."""
        return self.state is LoadState.LOADED


PENDING = LoadOutcome(LoadState.PENDING)


def read_bundled_dataset() -> bytes:
    """Read the raw JSON document shipped inside the package."""
    return resources.files(__package__).joinpath(DATASET_RESOURCE).read_bytes()


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise DatasetMalformed("Duplicate MIME type", {"mime": key})
        result[key] = value
    return result


def parse_document(text: str | bytes) -> ForwardMapping:
    """
    Parse a dataset document into a read-only forward mapping.

    The document must be UTF-8 encoded JSON: an object mapping each MIME type
    to an array of extension strings. Key order and the order of each array
    are preserved.

    Args:
        text: The JSON document, as text or UTF-8 bytes.

    Returns:
        Read-only mapping of MIME type to a tuple of extensions.

    Raises:
        DatasetMalformed: If the document is not valid JSON or has the wrong shape.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DatasetMalformed("Document is not UTF-8", {"error": str(e)}) from e

    try:
        document = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except (ValueError, RecursionError) as e:
        raise DatasetMalformed("Invalid JSON", {"error": str(e)}) from e

    if not isinstance(document, dict):
        raise DatasetMalformed("Top level must be an object", {"type": type(document).__name__})

    forward: dict[str, tuple[str, ...]] = {}
    for mime, extensions in document.items():
        if not isinstance(extensions, list):
            raise DatasetMalformed("Extensions must be an array", {"mime": mime})
        for ext in extensions:
            if not isinstance(ext, str):
                raise DatasetMalformed("Extension must be a string", {"mime": mime, "value": ext})
        forward[mime] = tuple(extensions)

    return MappingProxyType(forward)


class DatasetLoader:
    """
    Loads the dataset once and remembers the outcome.

    A failed load is permanent: later calls return the same failed outcome
    without trying again.
    """

    def __init__(self, source: DatasetSource | None = None):
        """
        Initialize the loader.

        Args:
            source: Document text, or a callable returning it. Defaults to the
                bundled dataset.
        """
        self._source = source if source is not None else read_bundled_dataset
        self._cell: Lazy[LoadOutcome] = Lazy(self._load_once)

    def _read_source(self) -> str | bytes:
        if callable(self._source):
            return self._source()
        return self._source

    def _load_once(self) -> LoadOutcome:
        try:
            text = self._read_source()
        except (OSError, ValueError) as e:
            error = DatasetUnreadable("Dataset could not be read", {"error": str(e)})
            logger.error(f"Failed to load MIME database: {error}")
            return LoadOutcome(LoadState.FAILED, error=error)

        try:
            mapping = parse_document(text)
        except DatasetMalformed as e:
            logger.error(f"Failed to load MIME database: {e}")
            return LoadOutcome(LoadState.FAILED, error=e)

        logger.debug(f"Loaded MIME database with {len(mapping)} types")
        return LoadOutcome(LoadState.LOADED, mapping=mapping)

    def load(self) -> LoadOutcome:
        """
        Load the dataset on first call; return the stored outcome afterwards.

        Returns:
            The load outcome. Every caller receives the same object.
        """
        return self._cell.get()

    @property
    def outcome(self) -> LoadOutcome:
        """Current outcome, without triggering a load."""
        if self._cell.initialized:
            return self._cell.get()
        return PENDING
