"""Initialize-once cell shared by every thread in the process."""

import threading
from collections.abc import Callable
from typing import Generic, TypeVar, cast

T = TypeVar("T")


class Lazy(Generic[T]):
    """
    Value computed by ``factory`` on first access and cached afterwards.

    Concurrent first callers are serialized on a lock so the factory runs
    exactly once; every caller receives the same object. Reads after
    initialization do not take the lock.

    If the factory raises, nothing is cached and the exception propagates.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._initialized = False
        self._value: T | None = None

    def get(self) -> T:
        """Return the value, computing it on first use."""
        if self._initialized:
            return cast(T, self._value)
        with self._lock:
            if not self._initialized:
                self._value = self._factory()
                self._initialized = True
        return cast(T, self._value)

    @property
    def initialized(self) -> bool:
        """Whether the factory has completed."""
        return self._initialized
