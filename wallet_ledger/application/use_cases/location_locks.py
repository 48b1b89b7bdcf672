"""Per-location locks serializing read-modify-write ledger operations."""

import threading
import weakref

from wallet_ledger.utils.utils import normalize_location


class LocationLocks:
    """Hand out one re-entrant lock per location.

    File locations are keyed by their resolved path, so ``w.json``,
    ``./w.json`` and ``file://`` spellings of one document share a lock.
    Database URLs are keyed verbatim. Entries are weak: a lock nobody holds
    drops out of the registry and a later call creates a fresh one.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: weakref.WeakValueDictionary[str, threading.RLock] = (
            weakref.WeakValueDictionary()
        )

    @staticmethod
    def key_for(location) -> str:
        """Return the registry key of ``location``."""
        return str(normalize_location(location))

    def lock_for(self, location) -> threading.RLock:
        """Return the lock guarding ``location``, creating it if needed."""
        key = self.key_for(location)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock


_DEFAULT_LOCKS = LocationLocks()


def get_default_locks() -> LocationLocks:
    """Return the process-wide lock registry."""
    return _DEFAULT_LOCKS


__all__ = ["LocationLocks", "get_default_locks"]
