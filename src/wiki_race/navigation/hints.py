import logging
from typing import Iterable, List

from wiki_race.capabilities.link_oracle import ILinkOracle
from wiki_race.models import ScoredCandidate
from wiki_race.navigation.scoring import rank_candidates

logger = logging.getLogger(__name__)

DEFAULT_HINT_COUNT = 5


async def suggest_links(
    oracle: ILinkOracle,
    current_title: str,
    goal_title: str,
    limit: int = DEFAULT_HINT_COUNT,
    exclude: Iterable[str] = (),
) -> List[ScoredCandidate]:
    """
    Suggest the most relevant links on the current article for a human player.

    Links are scored without the article extract, the same way the frontier
    search ranks its children.
    """
    links = await oracle.fetch_links(current_title)
    hints = rank_candidates(links, goal_title, exclude=exclude, limit=limit)
    logger.debug(f"Suggested {len(hints)} of {len(links)} links on '{current_title}' toward '{goal_title}'")
    return hints
