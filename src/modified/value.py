import contextlib
import copy
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

import attr
from typing_extensions import Concatenate, ParamSpec, Self

from modified.interfaces import IModified
from modified.logconfig import TRACE

if TYPE_CHECKING:
    from modified.resettable import Resettable

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger(__name__)


@attr.define(eq=False, repr=False)
class Modified(IModified[T]):
    """A container holding a single value which tracks whether that value has been
    written to since the container was created.

    Reading through the container (:py:meth:`deref`, :py:meth:`get`, equality,
    iteration, indexing, etc.) never affects the tracked state. Any operation
    which grants write access to the value marks the container as modified, even
    if the new value is equal to the old one. There is no way for the container to
    observe whether a mutable handle was actually used, so handing one out is
    treated as a modification.

    Containers are not thread-safe. Wrap them in a
    :py:class:`modified.synchronized.Synchronized` to share one between threads."""

    _value: T
    _modified: bool = False

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new_modified(cls, value: T) -> Self:
        """Create a new container holding `value` which is already marked modified."""
        return cls(value, modified=True)

    @classmethod
    def default(cls, factory: Optional[Callable[[], T]] = None) -> Self:
        """Create a new unmodified container holding the value returned by
        `factory`, or None if no factory is given."""
        return cls(factory() if factory is not None else None)  # type: ignore[arg-type]

    @classmethod
    def default_modified(cls, factory: Optional[Callable[[], T]] = None) -> Self:
        """Create a new container from `factory` (as :py:meth:`default`) which is
        already marked modified."""
        return cls(
            factory() if factory is not None else None,  # type: ignore[arg-type]
            modified=True,
        )

    def _mark_modified(self) -> None:
        if not self._modified:
            logger.log(TRACE, "%s marked as modified", type(self).__name__)
        self._modified = True

    def deref(self) -> T:
        return self._value

    def get(self) -> T:
        return self._value

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def get_value_changed(self) -> tuple[T, bool]:
        """Return the contained value and whether it has been modified."""
        return self._value, self._modified

    def is_modified(self) -> bool:
        return self._modified

    def set(self, value: T) -> None:
        """Replace the contained value with `value`, marking the container modified."""
        self._value = value
        self._mark_modified()

    def borrow_mut(self) -> T:
        """Return the contained value for in-place mutation.

        The container is marked modified as soon as this method is called."""
        self._mark_modified()
        return self._value

    @contextlib.contextmanager
    def mutate(self) -> Iterator["MutRef[T]"]:
        """Yield a :py:class:`MutRef` handle to the contained value.

        The container is marked modified on entry to the block, regardless of
        whether the handle is written to."""
        self._mark_modified()
        yield MutRef(self)

    def swap(
        self, f: Callable[Concatenate[T, P], T], *args: P.args, **kwargs: P.kwargs
    ) -> T:
        """Set the contained value to `f(old, *args, **kwargs)`, returning the new
        value. If `f` raises, neither the value nor the modified state change."""
        self.set(f(self._value, *args, **kwargs))
        return self._value

    def into_inner(self) -> T:
        return self._value

    def into_inner_changed(self) -> tuple[T, bool]:
        return self._value, self._modified

    def into_resettable(self) -> "Resettable[T]":
        """Return a :py:class:`modified.resettable.Resettable` holding the same value
        and modified state as this container."""
        from modified.resettable import (  # pylint: disable=import-outside-toplevel
            Resettable,
        )

        return Resettable(self._value, modified=self._modified)

    def __copy__(self) -> Self:
        return type(self)(self._value, modified=self._modified)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        # Registered before copying the value so self-references resolve to the copy.
        result = type(self)(None, modified=self._modified)  # type: ignore[arg-type]
        memo[id(self)] = result
        result._value = copy.deepcopy(self._value, memo)
        return result

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r}, modified={self._modified})"

    def __str__(self):
        return str(self._value)

    def __format__(self, format_spec):
        return format(self._value, format_spec)

    def __eq__(self, other):
        if isinstance(other, Modified):
            return self._value == other._value
        return self._value == other

    def __lt__(self, other):
        return self._value < _unwrap(other)

    def __le__(self, other):
        return self._value <= _unwrap(other)

    def __gt__(self, other):
        return self._value > _unwrap(other)

    def __ge__(self, other):
        return self._value >= _unwrap(other)

    def __bool__(self):
        return bool(self._value)

    def __len__(self):
        return len(self._value)  # type: ignore[arg-type]

    def __iter__(self):
        return iter(self._value)  # type: ignore[call-overload]

    def __contains__(self, item):
        return item in self._value  # type: ignore[operator]

    def __reversed__(self):
        return reversed(self._value)  # type: ignore[call-overload]

    def __getitem__(self, key):
        return self._value[key]  # type: ignore[index]

    def __setitem__(self, key, value):
        self._mark_modified()
        self._value[key] = value  # type: ignore[index]

    def __delitem__(self, key):
        self._mark_modified()
        del self._value[key]  # type: ignore[attr-defined]


def _unwrap(o):
    if isinstance(o, Modified):
        return o.deref()
    return o


@attr.define(eq=False)
class MutRef(Generic[T]):
    """A write handle to the value held by a :py:class:`Modified` container.

    Assigning to :py:attr:`value` writes straight through to the owning container.
    Handles are only produced by :py:meth:`Modified.mutate`."""

    _owner: Modified[T]

    @property
    def value(self) -> T:
        return self._owner.deref()

    @value.setter
    def value(self, value: T) -> None:
        self._owner.set(value)
