import asyncio
import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, List
from pydantic import BaseModel, ConfigDict, Field

STEP_TAKEN = "step_taken"
NAVIGATION_ENDED = "navigation_ended"

class NavigationEvent(BaseModel):
    """Progress notification from a running navigator."""
    # data carries NavigationStep / NavigationResult instances as they are
    model_config = ConfigDict(arbitrary_types_allowed=True, use_enum_values=True)

    type: str = Field(..., min_length=1, description="Event type, e.g. 'step_taken' or 'navigation_ended'")
    navigation_id: str = Field(..., min_length=1, description="Identifier of the navigation run that emitted it")
    data: Dict[str, Any] = Field(..., description="Event payload")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the event was created")

EventHandler = Callable[[NavigationEvent], Awaitable[None]]

class EventBus:
    """
    Fans navigator events out to async observers (progress displays,
    recorders, a game server).

    Handlers for one event run concurrently and in isolation: a handler
    that raises is logged and the others still run.
    """

    def __init__(self):
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self.logger = logging.getLogger(__name__)

    def subscribe(self, event_type: str, handler: EventHandler):
        self._subscribers[event_type].append(handler)
        self.logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type}")

    def unsubscribe(self, event_type: str, handler: EventHandler):
        """Remove one registration of ``handler``; unknown handlers are ignored."""
        handlers = self._subscribers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    async def publish(self, event: NavigationEvent):
        handlers = list(self._subscribers[event.type])
        if not handlers:
            return

        self.logger.debug(f"Publishing {event.type} for {event.navigation_id} to {len(handlers)} handlers")
        results = await asyncio.gather(
            *[self._safe_handle(handler, event) for handler in handlers],
            return_exceptions=True
        )
        failures = sum(1 for result in results if isinstance(result, Exception))
        if failures:
            self.logger.warning(f"{failures} of {len(handlers)} handlers failed for {event.type}")

    async def _safe_handle(self, handler: EventHandler, event: NavigationEvent):
        try:
            await handler(event)
        except Exception as e:
            self.logger.error(f"Handler {getattr(handler, '__name__', handler)} failed: {e}", exc_info=True)
            raise  # surfaced to gather() so publish can count it

    def get_subscriber_count(self, event_type: str) -> int:
        return len(self._subscribers[event_type])
