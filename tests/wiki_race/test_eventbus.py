"""
EventBus Tests
Testing the event system with NO external dependencies.
"""

import pytest
import logging

from wiki_race import EventBus, NavigationEvent
from wiki_race.events import STEP_TAKEN

logger = logging.getLogger(__name__)

@pytest.mark.unit
class TestEventBus:
    """Unit tests for EventBus functionality."""

    @pytest.mark.asyncio
    async def test_basic_event_flow(self, event_bus: EventBus):
        """Test basic publish/subscribe functionality."""
        received_events = []

        async def step_handler(event: NavigationEvent):
            received_events.append(event)
            logger.info(f"Handler received event: {event.type} for navigation {event.navigation_id}")

        event_bus.subscribe(STEP_TAKEN, step_handler)

        await event_bus.publish(NavigationEvent(
            type=STEP_TAKEN,
            navigation_id="greedy_test_123",
            data={"article": "Ice cream", "order": 1}
        ))

        assert len(received_events) == 1
        assert received_events[0].type == STEP_TAKEN
        assert received_events[0].navigation_id == "greedy_test_123"
        assert received_events[0].data["article"] == "Ice cream"

    @pytest.mark.asyncio
    async def test_handlers_only_receive_their_event_type(self, event_bus: EventBus):
        calls = []

        async def handler(event: NavigationEvent):
            calls.append(event.type)

        event_bus.subscribe("navigation_ended", handler)
        await event_bus.publish(NavigationEvent(type=STEP_TAKEN, navigation_id="nav", data={}))

        assert calls == []

    @pytest.mark.asyncio
    async def test_error_isolation(self, event_bus: EventBus):
        """Test that handler errors don't affect other handlers."""
        good_handler_calls = []

        async def failing_handler(event: NavigationEvent):
            raise ValueError("Intentional test failure")

        async def good_handler(event: NavigationEvent):
            good_handler_calls.append(event.navigation_id)

        event_bus.subscribe("error_test", failing_handler)
        event_bus.subscribe("error_test", good_handler)

        await event_bus.publish(NavigationEvent(type="error_test", navigation_id="error_nav_789", data={}))

        assert good_handler_calls == ["error_nav_789"]

    @pytest.mark.asyncio
    async def test_no_subscribers(self, event_bus: EventBus):
        """Publishing without subscribers is a no-op."""
        await event_bus.publish(NavigationEvent(type="no_subscribers", navigation_id="lonely_nav", data={}))

    def test_subscriber_count(self, event_bus: EventBus):
        async def dummy_handler(event: NavigationEvent):
            pass

        assert event_bus.get_subscriber_count("count_test") == 0
        event_bus.subscribe("count_test", dummy_handler)
        event_bus.subscribe("count_test", dummy_handler)
        assert event_bus.get_subscriber_count("count_test") == 2

    @pytest.mark.asyncio
    async def test_unsubscribe(self, event_bus: EventBus):
        calls = []

        async def handler(event: NavigationEvent):
            calls.append(event.navigation_id)

        event_bus.subscribe(STEP_TAKEN, handler)
        event_bus.unsubscribe(STEP_TAKEN, handler)
        event_bus.unsubscribe(STEP_TAKEN, handler)
        await event_bus.publish(NavigationEvent(type=STEP_TAKEN, navigation_id="nav", data={}))

        assert calls == []
        assert event_bus.get_subscriber_count(STEP_TAKEN) == 0

    def test_event_requires_type_and_id(self):
        with pytest.raises(ValueError):
            NavigationEvent(type="", navigation_id="nav", data={})
