import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class Lazy(Generic[T]):
    """A value computed on first access and shared afterwards.

    Concurrent first callers serialize on a lock; exactly one of them runs
    the initializer and everybody observes the same object. If the
    initializer raises, nothing is stored and the exception propagates, so
    a later call tries again."""

    __slots__ = ['_initializer', '_value', '_lock']

    def __init__(self, initializer: Callable[[], T]):
        self._initializer = initializer
        self._value: Optional[T] = None
        self._lock = threading.Lock()

    def get(self) -> T:
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._initializer()
            return self._value

    @property
    def initialized(self) -> bool:
        return self._value is not None
