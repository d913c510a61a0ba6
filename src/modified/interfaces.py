from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class IDeref(Generic[T], ABC):
    """``IDeref`` types are reference container types which return their contained
    value via :py:meth:`deref`.

    Dereferencing is always a read: it must never change any state tracked by the
    container."""

    __slots__ = ()

    @abstractmethod
    def deref(self) -> T:
        raise NotImplementedError()


class IModified(IDeref[T]):
    """``IModified`` types are reference containers which remember whether their
    contained value has been written to.

    Any operation which grants mutable access to the contained value marks the
    container as modified, whether or not the value actually changed.

    .. seealso::

       :py:class:`IResettable`"""

    __slots__ = ()

    @abstractmethod
    def is_modified(self) -> bool:
        raise NotImplementedError()

    def is_unchanged(self) -> bool:
        """Return True if the contained value has not been written to."""
        return not self.is_modified()


class IResettable(IModified[T]):
    """``IResettable`` types are :py:class:`IModified` containers whose modified
    state may be cleared without touching the contained value."""

    __slots__ = ()

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError()
