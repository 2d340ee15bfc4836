import logging
from collections import deque
from typing import Deque, List, Tuple

from wiki_race.models import NavigatorStatus
from wiki_race.navigation.navigator import Navigator
from wiki_race.navigation.scoring import explain_choice, rank_candidates
from wiki_race.utils.wiki_helpers import title_key

logger = logging.getLogger(__name__)


class FrontierSearchNavigator(Navigator):
    """
    Breadth-ordered search over a pruned frontier.

    Each expanded article only contributes its ``frontier_top_k`` best-scored
    unvisited links, and nothing deeper than ``depth_cap`` hops is expanded,
    so the number of oracle calls stays bounded. The first path that reaches
    the goal is accepted; because of the pruning it approximates the shortest
    path rather than guaranteeing it.

    The path stays ``[start]`` until the goal is found, which is also what a
    failed or cancelled run returns.
    """

    strategy_name = "frontier"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.expanded = 0

    async def _navigate(self) -> NavigatorStatus:
        self.expanded = 0
        frontier: Deque[Tuple[str, List[str]]] = deque([(self.start_title, [self.start_title])])

        while frontier and self.is_running:
            article, path = frontier.popleft()

            if self._is_goal(article):
                await self._accept_path(path)
                return NavigatorStatus.SUCCEEDED

            key = title_key(article)
            if key in self._visited or len(path) - 1 >= self.config.depth_cap:
                continue

            self._visited.add(key)
            links = await self._fetch_links(article)
            if not self.is_running:
                break

            children = rank_candidates(
                links,
                self.goal_title,
                exclude=self._visited,
                limit=self.config.frontier_top_k,
            )
            for child in children:
                frontier.append((child.article, path + [child.article]))

            self.expanded += 1
            logger.debug(
                f"Expanded '{article}' at depth {len(path) - 1}: "
                f"{len(children)} children, frontier size {len(frontier)}"
            )

            await self._pause(self.config.expansion_delay)

        if self.is_running:
            logger.info(
                f"Navigator {self.navigation_id} exhausted its frontier after {self.expanded} expansions"
            )
        return NavigatorStatus.FAILED

    async def _accept_path(self, path: List[str]):
        """Record every hop of the found path after the start."""
        for article in path[1:]:
            await self._append_step(article, explain_choice(article, self.goal_title))
