"""Process-wide locks that serialize stock mutations.

Keys are always acquired in sorted order, so two callers locking
overlapping item sets can never wait on each other in a cycle. Order
mutations take their order key before any item keys.

A key's lock only lives in the registry while some thread holds it or
waits for it, so the registry stays as small as the work in flight.
"""

import threading
from contextlib import contextmanager


def order_key(order_id):
    return f"order:{order_id}"


def item_key(shop_item_id):
    return f"item:{shop_item_id}"


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = threading.RLock()
        self.users = 0


class StockLocks:
    def __init__(self):
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def __len__(self):
        with self._guard:
            return len(self._entries)

    def _checkout(self, key) -> threading.RLock:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
            entry.users += 1
            return entry.lock

    def _checkin(self, key):
        with self._guard:
            entry = self._entries[key]
            entry.users -= 1
            if entry.users == 0:
                del self._entries[key]

    @contextmanager
    def hold(self, *keys):
        """Hold the locks for ``keys`` for the duration of the block."""
        held = []
        try:
            for key in sorted({str(k) for k in keys if k}):
                lock = self._checkout(key)
                try:
                    lock.acquire()
                except BaseException:
                    self._checkin(key)
                    raise
                held.append((key, lock))
            yield
        finally:
            for key, lock in reversed(held):
                lock.release()
                self._checkin(key)


stock_locks = StockLocks()
