"""Tests for the per-key stock locks."""

import threading
import time

from storefront.inventory.locks import StockLocks, item_key, order_key


class TestStockLocks:
    def test_keys(self):
        assert order_key("o1") == "order:o1"
        assert item_key("i1") == "item:i1"

    def test_hold_is_reentrant_for_the_same_thread(self):
        locks = StockLocks()
        with locks.hold("item:a"):
            with locks.hold("item:a", "item:b"):
                pass

    def test_hold_ignores_empty_keys(self):
        locks = StockLocks()
        with locks.hold(None, "", "item:a"):
            pass

    def test_overlapping_holds_are_serialized(self):
        locks = StockLocks()
        events = []

        def worker(name, keys):
            with locks.hold(*keys):
                events.append(f"{name}-in")
                time.sleep(0.05)
                events.append(f"{name}-out")

        first = threading.Thread(target=worker, args=("a", ["item:1", "item:2"]))
        second = threading.Thread(target=worker, args=("b", ["item:2", "item:1"]))
        first.start()
        second.start()
        first.join(timeout=5)
        second.join(timeout=5)

        assert not first.is_alive() and not second.is_alive()
        # Each worker leaves before the other enters
        assert events[0].split("-")[0] == events[1].split("-")[0]
        assert events[2].split("-")[0] == events[3].split("-")[0]

    def test_locks_are_released_after_errors(self):
        locks = StockLocks()
        try:
            with locks.hold("item:a"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        entered = []

        def worker():
            with locks.hold("item:a"):
                entered.append(True)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join(timeout=5)
        assert entered == [True]
        assert len(locks) == 0

    def test_registry_only_tracks_keys_in_use(self):
        locks = StockLocks()
        with locks.hold("order:o1", "item:a"):
            assert len(locks) == 2
            with locks.hold("item:a", "item:b"):
                assert len(locks) == 3
            assert len(locks) == 2
        assert len(locks) == 0

    def test_registry_stays_empty_after_many_orders(self):
        locks = StockLocks()

        def worker(start):
            for n in range(start, start + 200):
                with locks.hold(order_key(f"o{n}")):
                    with locks.hold(item_key(f"i{n % 7}"), item_key(f"i{n % 5}")):
                        pass

        threads = [threading.Thread(target=worker, args=(n * 200,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert not any(thread.is_alive() for thread in threads)
        assert len(locks) == 0
