"""
Live Link Oracle Adapter

Maps the link oracle interface onto the live Wikipedia service. Filters
namespaced links and turns every lookup failure into an empty result.
"""

import logging
from typing import Any, Dict, List, Optional

from wiki_race.capabilities.link_oracle import ILinkOracle
from wiki_race.config import NavigatorConfig
from wiki_race.exceptions import PageNotFoundException, WikiRaceException
from wiki_race.utils.wiki_helpers import is_namespaced, title_key
from wiki_race.wikipedia.live_service import LiveWikiService


class LiveLinkOracle(ILinkOracle):
    """
    Implementation of the link oracle backed by LiveWikiService.
    """

    def __init__(self, service: LiveWikiService, use_cache: bool = True):
        self.service = service
        self.use_cache = use_cache
        self.request_count = 0
        self._links_cache: Dict[str, List[str]] = {}
        self._extract_cache: Dict[str, str] = {}
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Optional[NavigatorConfig] = None) -> "LiveLinkOracle":
        """Build the oracle and its service from a NavigatorConfig."""
        config = config or NavigatorConfig()
        service = LiveWikiService(
            language=config.language,
            timeout=config.oracle_timeout,
            user_agent=config.user_agent,
        )
        return cls(service, use_cache=config.cache_oracle)

    async def fetch_links(self, page_title: str) -> List[str]:
        """Fetch outbound links, swallowing every error into an empty list."""
        key = title_key(page_title)
        if self.use_cache and key in self._links_cache:
            return list(self._links_cache[key])

        self.request_count += 1
        try:
            links = await self.service.get_links(page_title)
        except PageNotFoundException as e:
            self.logger.info(f"No links for '{page_title}': {e.message}")
            return []
        except WikiRaceException as e:
            self.logger.warning(f"Link lookup failed for '{page_title}': {e.message}")
            return []
        except Exception as e:
            self.logger.error(f"Unexpected link lookup failure for '{page_title}': {e}", exc_info=True)
            return []

        links = [link for link in links if not is_namespaced(link)]
        if self.use_cache:
            self._links_cache[key] = links
        return list(links)

    async def fetch_extract(self, page_title: str) -> str:
        """Fetch the article extract, swallowing every error into an empty string."""
        key = title_key(page_title)
        if self.use_cache and key in self._extract_cache:
            return self._extract_cache[key]

        self.request_count += 1
        try:
            extract = await self.service.get_extract(page_title)
        except WikiRaceException as e:
            self.logger.warning(f"Extract lookup failed for '{page_title}': {e.message}")
            return ""
        except Exception as e:
            self.logger.error(f"Unexpected extract lookup failure for '{page_title}': {e}", exc_info=True)
            return ""

        if self.use_cache:
            self._extract_cache[key] = extract
        return extract

    def clear_cache(self):
        self._links_cache.clear()
        self._extract_cache.clear()

    def get_capability_info(self) -> Dict[str, Any]:
        """Get information about this oracle."""
        return {
            "type": "live_wikipedia",
            "language": self.service.language,
            "base_url": self.service.base_url,
            "timeout_seconds": self.service.timeout,
            "cached": self.use_cache,
            "features": ["links", "extracts"],
        }
