"""Unit tests for EventBus."""

import asyncio
import pytest
from communication.bus import EventBus


class TestEventBus:
    """Tests for EventBus class."""

    @pytest.mark.asyncio
    async def test_subscribe(self, bus):
        sub = await bus.subscribe("race-log")
        assert sub.name == "race-log"
        assert bus.get_stats()["subscriber_count"] == 1

    @pytest.mark.asyncio
    async def test_subscribe_same_name_returns_existing(self, bus):
        first = await bus.subscribe("race-log")
        assert await bus.subscribe("race-log") is first

    @pytest.mark.asyncio
    async def test_subscribe_custom_queue_size(self, bus):
        sub = await bus.subscribe("race-log", max_queue_size=50)
        assert sub.queue.maxsize == 50

    @pytest.mark.asyncio
    async def test_unsubscribe(self, bus):
        await bus.subscribe("race-log")
        assert await bus.unsubscribe("race-log") is True
        assert await bus.unsubscribe("race-log") is False
        assert bus.get_stats()["subscriber_count"] == 0

    @pytest.mark.asyncio
    async def test_publish_to_all_subscribers(self, bus):
        sub1 = await bus.subscribe("one")
        sub2 = await bus.subscribe("two")
        assert await bus.publish({"kind": "race_finished"}) == 2
        msg1 = await asyncio.wait_for(sub1.queue.get(), timeout=1.0)
        msg2 = await asyncio.wait_for(sub2.queue.get(), timeout=1.0)
        assert msg1 == msg2 == {"kind": "race_finished"}

    @pytest.mark.asyncio
    async def test_topic_filter(self, bus):
        """Subscribers with topics only get matching items."""
        states = await bus.subscribe("states", topics=["state"])
        everything = await bus.subscribe("all")
        await bus.publish({"kind": "race_finished"}, topic="event")
        assert states.queue.empty()
        assert everything.queue.qsize() == 1

    @pytest.mark.asyncio
    async def test_queue_overflow_drops_message(self):
        bus = EventBus(queue_size=2)
        sub = await bus.subscribe("slow")
        for tick in range(3):
            await bus.publish({"tick": tick})
        assert sub.dropped == 1
        assert sub.received == 2
        assert bus.get_stats()["total_dropped"] == 1

    @pytest.mark.asyncio
    async def test_get_stats(self, bus):
        await bus.subscribe("one")
        await bus.publish({"tick": 1})
        stats = bus.get_stats()
        assert stats["total_published"] == 1
        assert stats["total_delivered"] == 1
