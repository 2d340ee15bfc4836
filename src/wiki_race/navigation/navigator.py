import asyncio
import logging
import random
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, FrozenSet, List, Optional, Set

from wiki_race.capabilities.link_oracle import ILinkOracle
from wiki_race.config import NavigatorConfig
from wiki_race.events import EventBus, NavigationEvent, NAVIGATION_ENDED, STEP_TAKEN
from wiki_race.exceptions import NavigatorBusyError
from wiki_race.models import NavigationResult, NavigationStep, NavigatorStatus
from wiki_race.utils.wiki_helpers import titles_equal, validate_page_title

logger = logging.getLogger(__name__)

StepCallback = Callable[[NavigationStep], None]


class Navigator(ABC):
    """
    Base class for path-finding strategies.

    A navigator owns its visited set and path for one (start, goal) pair and
    talks to the article graph only through an ILinkOracle. Cancellation is
    cooperative: ``stop()`` flips the status and the strategy loop notices it
    at its next check, which happens at the top of every iteration and right
    after every await.
    """

    strategy_name: str = "base"

    def __init__(
        self,
        start_title: str,
        goal_title: str,
        oracle: ILinkOracle,
        on_step: Optional[StepCallback] = None,
        config: Optional[NavigatorConfig] = None,
        rng: Optional[random.Random] = None,
        event_bus: Optional[EventBus] = None,
    ):
        validate_page_title(start_title)
        validate_page_title(goal_title)

        self.start_title = start_title
        self.goal_title = goal_title
        self.oracle = oracle
        self.on_step = on_step
        self.config = config or NavigatorConfig()
        self.rng = rng or random.Random()
        self.event_bus = event_bus

        self.navigation_id = self._generate_navigation_id()
        self.status = NavigatorStatus.IDLE
        self.oracle_calls = 0
        self.start_timestamp: Optional[datetime] = None
        self.end_timestamp: Optional[datetime] = None

        self._path: List[NavigationStep] = []
        self._visited: Set[str] = set()
        self._active = False

    def _generate_navigation_id(self) -> str:
        date_str = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{self.strategy_name}_{date_str}_{uuid.uuid4().hex[:4]}"

    # --- Public surface ---

    async def run(self) -> List[NavigationStep]:
        """Navigate from start toward goal until success, failure or cancellation."""
        if self._active:
            raise NavigatorBusyError(f"Navigator {self.navigation_id} is already running")

        self._active = True
        try:
            self._path = []
            self._visited = set()
            self.oracle_calls = 0
            self.end_timestamp = None
            self.start_timestamp = datetime.now()
            self.status = NavigatorStatus.RUNNING

            logger.info(
                f"Navigator {self.navigation_id} started: '{self.start_title}' -> '{self.goal_title}'"
            )
            await self._append_step(self.start_title, "Starting point")

            outcome = await self._navigate()
            # A path ending at the goal is a success even if stop() arrived with the last step
            if self._path and self._is_goal(self._path[-1].article):
                self.status = NavigatorStatus.SUCCEEDED
            elif self.status is NavigatorStatus.RUNNING:
                self.status = outcome
        except Exception as e:
            logger.error(f"Navigator {self.navigation_id} crashed: {e}", exc_info=True)
            self.status = NavigatorStatus.FAILED
            raise
        finally:
            self.end_timestamp = datetime.now()
            self._active = False

        logger.info(
            f"Navigator {self.navigation_id} finished with status {self.status.value} "
            f"after {len(self._path) - 1} hops and {self.oracle_calls} oracle calls"
        )
        await self._publish(NAVIGATION_ENDED, {"result": self.result()})
        return self.current_path()

    def stop(self):
        """Request cancellation. Safe to call at any time, any number of times."""
        if self.status is NavigatorStatus.RUNNING:
            self.status = NavigatorStatus.CANCELLED
            logger.info(f"Navigator {self.navigation_id} cancelled")

    def current_path(self) -> List[NavigationStep]:
        """Snapshot of the path so far."""
        return [step.model_copy() for step in self._path]

    def result(self) -> NavigationResult:
        return NavigationResult.from_navigator(self)

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    @property
    def is_running(self) -> bool:
        return self.status is NavigatorStatus.RUNNING

    # --- Strategy hook ---

    @abstractmethod
    async def _navigate(self) -> NavigatorStatus:
        """
        Run the strategy loop after the start step has been recorded.

        Returns:
            SUCCEEDED or FAILED. Cancellation is tracked by ``status`` itself.
        """
        pass

    # --- Helpers for strategies ---

    def _is_goal(self, page_title: str) -> bool:
        return titles_equal(page_title, self.goal_title)

    async def _append_step(self, article: str, reasoning: Optional[str]) -> NavigationStep:
        step = NavigationStep(article=article, order=len(self._path), reasoning=reasoning)
        self._path.append(step)
        logger.debug(f"Navigator {self.navigation_id} step {step.order}: '{article}' ({reasoning})")

        if self.on_step:
            try:
                self.on_step(step.model_copy())
            except Exception as e:
                logger.error(f"on_step callback failed for '{article}': {e}", exc_info=True)

        await self._publish(STEP_TAKEN, {"step": step, "strategy": self.strategy_name})
        return step

    async def _publish(self, event_type: str, data: dict):
        if self.event_bus:
            await self.event_bus.publish(NavigationEvent(
                type=event_type,
                navigation_id=self.navigation_id,
                data=data,
            ))

    async def _fetch_links(self, page_title: str) -> List[str]:
        """Ask the oracle for links; a misbehaving oracle counts as an empty answer."""
        self.oracle_calls += 1
        try:
            return list(await self.oracle.fetch_links(page_title))
        except Exception as e:
            logger.warning(f"Oracle failed to fetch links for '{page_title}': {e}")
            return []

    async def _fetch_extract(self, page_title: str) -> str:
        self.oracle_calls += 1
        try:
            return await self.oracle.fetch_extract(page_title) or ""
        except Exception as e:
            logger.warning(f"Oracle failed to fetch extract for '{page_title}': {e}")
            return ""

    async def _pause(self, seconds: float):
        if seconds > 0:
            await asyncio.sleep(seconds)
