import contextlib
import logging
import threading
from collections.abc import Iterator
from typing import Callable, TypeVar

from typing_extensions import Concatenate, ParamSpec

from modified.interfaces import IModified, IResettable
from modified.logconfig import TRACE
from modified.value import Modified

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


class Synchronized(IModified[T]):
    """Guard a :py:class:`modified.value.Modified` container with a reentrant lock
    so it may be shared between threads.

    The convenience methods each hold the lock for a single operation. Use
    :py:meth:`lock` to perform several operations (such as checking the modified
    state and then resetting it) atomically::

        with synced.lock() as v:
            if v.is_modified():
                save(v.deref())
                v.reset()
    """

    __slots__ = ("_inner", "_lock")

    def __init__(self, inner: Modified[T]) -> None:
        self._inner = inner
        self._lock = threading.RLock()

    @contextlib.contextmanager
    def lock(self) -> Iterator[Modified[T]]:
        with self._lock:
            logger.log(TRACE, "Acquired lock on %r", self._inner)
            yield self._inner

    def deref(self) -> T:
        with self._lock:
            return self._inner.deref()

    def is_modified(self) -> bool:
        with self._lock:
            return self._inner.is_modified()

    def set(self, value: T) -> None:
        with self._lock:
            self._inner.set(value)

    def swap(
        self, f: Callable[Concatenate[T, P], T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        """Atomically swap the contained value to `f(old, *args, **kwargs)`,
        returning the new value."""
        with self._lock:
            return self._inner.swap(f, *args, **kwargs)

    def reset(self) -> None:
        """Reset the wrapped container.

        Raises a TypeError if the wrapped container cannot be reset."""
        with self._lock:
            if not isinstance(self._inner, IResettable):
                raise TypeError(
                    f"Cannot reset container of type {type(self._inner).__name__}"
                )
            self._inner.reset()

    def __repr__(self):
        return f"Synchronized({self._inner!r})"
