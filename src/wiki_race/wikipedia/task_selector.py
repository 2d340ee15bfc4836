"""
Wikipedia Task Selector

Picks a random start/goal pair of articles to race between.
"""

import logging
from typing import Iterable, Optional

from wiki_race.exceptions import WikiRaceException
from wiki_race.models import Task
from wiki_race.utils.wiki_helpers import is_structural_noise, title_key, titles_equal
from wiki_race.wikipedia.live_service import LiveWikiService

logger = logging.getLogger(__name__)


async def select_random_task(
        service: LiveWikiService,
        max_retries: int = 3,
        batch_size: int = 20,
        exclude: Iterable[str] = (),
    ) -> Optional[Task]:
    """
    Select two distinct random articles that are not lists, disambiguation
    or namespaced pages. Titles in ``exclude`` are never picked, which lets a
    caller that already holds one end of the race draw only the other.
    Returns None when no pair could be found.
    """
    excluded = {title_key(title) for title in exclude}
    for attempt in range(max_retries):
        try:
            random_pages = await service.get_random_pages(count=batch_size)
        except WikiRaceException as e:
            logger.warning(f"Error in attempt {attempt + 1} to select task: {e.message}")
            continue

        valid_pages = [
            page for page in random_pages
            if not is_structural_noise(page) and title_key(page) not in excluded
        ]
        if len(valid_pages) < 2:
            logger.debug(f"Not enough valid pages ({len(valid_pages)}) in attempt {attempt + 1}")
            continue

        start_page = valid_pages[0]
        target_page = next((p for p in valid_pages[1:] if not titles_equal(p, start_page)), None)
        if target_page is None:
            continue

        logger.info(f"Selected task: '{start_page}' -> '{target_page}'")
        return Task(start_page_title=start_page, target_page_title=target_page)

    logger.error("Failed to select valid task after all attempts")
    return None
