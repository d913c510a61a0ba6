import logging
from typing import TypeVar

import attr

from modified.interfaces import IResettable
from modified.logconfig import TRACE
from modified.value import Modified

T = TypeVar("T")

logger = logging.getLogger(__name__)


@attr.define(eq=False, repr=False)
class Resettable(Modified[T], IResettable[T]):
    """A :py:class:`modified.value.Modified` container whose modified state may be
    cleared with :py:meth:`reset`.

    Resetting establishes a new baseline for change tracking. No record of earlier
    values is kept, so a container is considered modified only with respect to the
    last reset (or to its construction, if it has never been reset)."""

    def reset(self) -> None:
        """Mark the container unmodified without changing the contained value."""
        if self._modified:
            logger.log(TRACE, "%s reset to unmodified", type(self).__name__)
        self._modified = False
