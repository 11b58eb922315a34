# ==============================================
# ExclusiveAccess
# ==============================================
#
# PURPOSE:
#   Serializes all access to one store handle. Many threads may share
#   a MetadataExtractor, but only one iteration or lookup runs against
#   the LevelDB handle at a time; everybody else blocks on the lock.
#
# POISONING:
#   If an exception outside the element_ldb error hierarchy escapes a
#   `hold()` block, the guard is marked poisoned and every later
#   `hold()` raises LockUnavailable (chained to that first failure)
#   without touching the store again. ElementLdbError subclasses such
#   as StoreReadError pass through without poisoning.
#
# USAGE:
# ------
#   guard = ExclusiveAccess(handle)
#   with guard.hold() as handle:
#       for key, value in handle.iterate():
#           ...
#
# ==============================================

import logging
import threading
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

from element_ldb.errors import ElementLdbError, LockUnavailable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExclusiveAccess(Generic[T]):
    """Mutual-exclusion guard around a single shared resource."""

    def __init__(self, resource: T):
        self._resource = resource
        self._lock = threading.Lock()
        self._poisoned_by: Optional[BaseException] = None

    @property
    def poisoned(self) -> bool:
        return self._poisoned_by is not None

    @contextmanager
    def hold(self) -> Iterator[T]:
        """
        Acquire the lock and yield the guarded resource.

        Raises:
            LockUnavailable: If a previous holder failed while holding the lock
        """
        with self._lock:
            if self._poisoned_by is not None:
                raise LockUnavailable(
                    "Failed to lock database: guard poisoned by an earlier failure "
                    f"({type(self._poisoned_by).__name__}: {self._poisoned_by})"
                ) from self._poisoned_by
            try:
                yield self._resource
            except ElementLdbError:
                raise
            except Exception as e:
                self._poisoned_by = e
                logger.error("Store guard poisoned by %s: %s", type(e).__name__, e)
                raise
