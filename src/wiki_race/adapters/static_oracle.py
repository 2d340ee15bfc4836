"""
Static Link Oracle

An in-memory article graph. Used as a fixture in tests and for offline
races where the live API is not wanted.
"""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from wiki_race.capabilities.link_oracle import ILinkOracle
from wiki_race.exceptions import WikiServiceUnavailableException
from wiki_race.utils.wiki_helpers import is_namespaced, title_key


class StaticLinkOracle(ILinkOracle):
    """
    Link oracle over a fixed ``{title: [links]}`` mapping.

    Titles are looked up case-insensitively. Titles listed in ``raise_for``
    make both lookups raise, which simulates an oracle that breaks its own
    no-exception contract. ``latency`` delays every lookup so tests can act
    while a request is in flight.
    """

    def __init__(
        self,
        graph: Dict[str, List[str]],
        extracts: Optional[Dict[str, str]] = None,
        raise_for: Iterable[str] = (),
        filter_namespaces: bool = True,
        latency: float = 0.0,
    ):
        self._graph = {title_key(title): list(links) for title, links in graph.items()}
        self._extracts = {title_key(title): text for title, text in (extracts or {}).items()}
        self._raise_for = {title_key(title) for title in raise_for}
        self.filter_namespaces = filter_namespaces
        self.latency = latency
        self.calls: List[Tuple[str, str]] = []
        self.logger = logging.getLogger(__name__)

    async def _lookup(self, kind: str, page_title: str):
        self.calls.append((kind, page_title))
        if self.latency:
            await asyncio.sleep(self.latency)
        if title_key(page_title) in self._raise_for:
            raise WikiServiceUnavailableException(f"Simulated outage for '{page_title}'")

    async def fetch_links(self, page_title: str) -> List[str]:
        await self._lookup("links", page_title)
        links = self._graph.get(title_key(page_title), [])
        if self.filter_namespaces:
            links = [link for link in links if not is_namespaced(link)]
        return list(links)

    async def fetch_extract(self, page_title: str) -> str:
        await self._lookup("extract", page_title)
        return self._extracts.get(title_key(page_title), "")

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def get_capability_info(self) -> Dict[str, Any]:
        return {
            "type": "static_graph",
            "articles": len(self._graph),
            "features": ["links", "extracts"],
        }
