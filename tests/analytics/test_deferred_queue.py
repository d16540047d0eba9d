"""
Tests for analytics.deferred — single-slot pending queue.
"""

from analytics.deferred import DeferredQueue


class TestDeferredQueue:
    def test_empty_drain(self):
        queue = DeferredQueue()
        assert queue.drain() == []
        assert len(queue) == 0

    def test_latest_payload_wins(self):
        queue = DeferredQueue()
        assert queue.enqueue("cart_updated", {"id": 1}) is False
        assert queue.enqueue("cart_updated", {"id": 2}) is True

        assert queue.drain() == [("cart_updated", {"id": 2})]

    def test_drain_in_first_enqueued_kind_order(self):
        queue = DeferredQueue()
        queue.enqueue("page_viewed", {"url": "/a"})
        queue.enqueue("cart_updated", {"id": 1})
        queue.enqueue("page_viewed", {"url": "/b"})

        assert queue.drain() == [
            ("page_viewed", {"url": "/b"}),
            ("cart_updated", {"id": 1}),
        ]

    def test_drain_empties_queue(self):
        queue = DeferredQueue()
        queue.enqueue("page_viewed", {"url": "/a"})
        queue.drain()

        assert len(queue) == 0
        assert "page_viewed" not in queue
        assert queue.drain() == []

    def test_peek_and_kinds(self):
        queue = DeferredQueue()
        queue.enqueue("search_viewed", {"term": "hat"})

        assert queue.peek("search_viewed") == {"term": "hat"}
        assert queue.peek("page_viewed") is None
        assert queue.kinds() == ("search_viewed",)
