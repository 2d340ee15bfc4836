import asyncio
import logging
from typing import Optional

from wiki_race.models import NavigatorStatus
from wiki_race.navigation.navigator import Navigator
from wiki_race.navigation.scoring import (
    broad_candidates,
    explain_choice,
    rank_candidates,
    weighted_choice,
)
from wiki_race.utils.wiki_helpers import title_key

logger = logging.getLogger(__name__)

# The broadening fallback picks among this many of the first broad links
BROADENING_POOL = 3


class GreedyWalkNavigator(Navigator):
    """
    Single-path navigator that scores the links of the current article and
    follows one of the best, drawn by score weight.

    When nothing usable is left it refetches the links and escapes through a
    broad hub title. On failure the partial walk is returned.
    """

    strategy_name = "greedy"

    async def _navigate(self) -> NavigatorStatus:
        current = self.start_title
        attempts = 0

        while self.is_running and attempts < self.config.max_attempts:
            if self._is_goal(current):
                return NavigatorStatus.SUCCEEDED

            self._visited.add(title_key(current))

            next_article = await self._select_next_article(current)
            if not self.is_running:
                break

            reasoning = None
            if next_article is None:
                next_article = await self._select_broader_article(current)
                if not self.is_running:
                    break
                if next_article is None:
                    logger.info(f"Navigator {self.navigation_id} stuck at '{current}' with no unvisited links")
                    return NavigatorStatus.FAILED
                reasoning = f"Broadening search from '{current}'"

            attempts += 1
            await self._append_step(next_article, reasoning or explain_choice(next_article, self.goal_title))
            current = next_article

            if self._is_goal(current):
                return NavigatorStatus.SUCCEEDED
            if not self.is_running:
                break

            await self._pause(self.rng.uniform(self.config.step_delay_min, self.config.step_delay_max))

        if self._is_goal(current):
            return NavigatorStatus.SUCCEEDED
        if self.is_running:
            logger.info(f"Navigator {self.navigation_id} used all {self.config.max_attempts} attempts")
        return NavigatorStatus.FAILED

    async def _select_next_article(self, current: str) -> Optional[str]:
        """Score the current article's links and pick the next hop, or None if none are usable."""
        links, context = await asyncio.gather(
            self._fetch_links(current),
            self._fetch_extract(current),
        )

        candidates = rank_candidates(
            links,
            self.goal_title,
            context_text=context,
            exclude=self._visited,
            limit=self.config.candidate_limit,
        )
        if not candidates:
            logger.debug(f"No unvisited candidates on '{current}'")
            return None

        if self.config.weighted_selection:
            choice = weighted_choice(candidates, self.rng)
        else:
            choice = candidates[0]

        logger.debug(
            f"Chose '{choice.article}' ({choice.score}) from {len(candidates)} candidates on '{current}'"
        )
        return choice.article

    async def _select_broader_article(self, current: str) -> Optional[str]:
        """Refetch the links and escape through a broad, unvisited title."""
        if not self.is_running:
            return None

        links = await self._fetch_links(current)
        broad = broad_candidates(links, exclude=self._visited)
        if not broad:
            return None

        choice = self.rng.choice(broad[:BROADENING_POOL])
        logger.info(f"Broadening from '{current}' to '{choice}'")
        return choice
