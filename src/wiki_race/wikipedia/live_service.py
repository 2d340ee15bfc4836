import logging
import httpx
from typing import Any, Dict, List, Optional

from wiki_race.exceptions import PageNotFoundException, WikiServiceUnavailableException

DEFAULT_USER_AGENT = "wiki-race/0.1 (https://github.com/wiki-race/wiki-race)"

class LiveWikiService:
    """
    Service for interacting directly with the live Wikipedia API.
    All methods are asynchronous and every request carries a timeout.
    """
    def __init__(
        self,
        language: str = "en",
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.language = language
        self.timeout = timeout
        self.base_url = f"https://{language}.wikipedia.org/w/api.php"
        self.headers = {"User-Agent": user_agent}
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    async def _get_json(self, params: Dict[str, Any], timeout: Optional[float] = None) -> Any:
        """Issue a single GET against the API and decode the JSON body."""
        try:
            async with httpx.AsyncClient(
                timeout=timeout or self.timeout,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                response = await client.get(self.base_url, params=params)
                response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            raise WikiServiceUnavailableException(f"Wikipedia API request failed: {e}")
        except ValueError as e:
            raise WikiServiceUnavailableException(f"Wikipedia API returned malformed JSON: {e}")

        if not isinstance(data, (dict, list)):
            raise WikiServiceUnavailableException("Unexpected API response format")
        if isinstance(data, dict) and "error" in data:
            raise WikiServiceUnavailableException(f"Wikipedia API error: {data['error'].get('info', data['error'])}")
        return data

    async def get_random_pages(self, count: int = 20) -> List[str]:
        """Get random article titles from the main namespace."""
        params = {
            "action": "query", "format": "json", "list": "random",
            "rnnamespace": "0", "rnfilterredir": "nonredirects", "rnlimit": str(count)
        }
        data = await self._get_json(params, timeout=5.0)
        if "query" not in data or "random" not in data["query"]:
            raise WikiServiceUnavailableException("Unexpected API response format for get_random_pages")
        pages = [page["title"] for page in data["query"]["random"]]
        self.logger.debug(f"Fetched {len(pages)} random pages")
        return pages

    async def search_titles(self, query: str, limit: int = 10) -> List[str]:
        """Return article titles matching a free-text query (opensearch)."""
        params = {
            "action": "opensearch", "format": "json", "search": query,
            "limit": str(limit), "namespace": "0"
        }
        data = await self._get_json(params, timeout=5.0)
        # opensearch answers [query, [titles], [descriptions], [urls]]
        if not isinstance(data, list) or len(data) < 2:
            raise WikiServiceUnavailableException("Unexpected API response format for search_titles")
        return list(data[1])

    async def get_links(self, page_title: str) -> List[str]:
        """
        Fetch every outbound main-namespace link of an article, following
        pagination until the API stops returning a continuation token.
        """
        all_links = []
        plcontinue = None

        while True:
            params = {
                "action": "query", "format": "json", "prop": "links",
                "titles": page_title, "pllimit": "500", "plnamespace": "0",
                "redirects": "1", "formatversion": "2"
            }
            if plcontinue:
                params["plcontinue"] = plcontinue

            data = await self._get_json(params)

            pages = data.get("query", {}).get("pages", [])
            if not pages:
                raise PageNotFoundException(f"Page not found: {page_title}")
            page = pages[0]
            if "missing" in page or "invalid" in page:
                raise PageNotFoundException(f"Page does not exist: {page_title}")

            all_links.extend(link["title"] for link in page.get("links", []))

            continue_data = data.get("continue", {})
            if "plcontinue" in continue_data:
                plcontinue = continue_data["plcontinue"]
            else:
                break

        self.logger.debug(f"Fetched {len(all_links)} links for '{page_title}'")
        return all_links

    async def get_extract(self, page_title: str) -> str:
        """Fetch the plain-text introduction of an article."""
        params = {
            "action": "query", "format": "json", "prop": "extracts",
            "titles": page_title, "exintro": "1", "explaintext": "1",
            "redirects": "1", "formatversion": "2"
        }
        data = await self._get_json(params)

        pages = data.get("query", {}).get("pages", [])
        if not pages or "missing" in pages[0] or "invalid" in pages[0]:
            raise PageNotFoundException(f"Page does not exist: {page_title}")
        return pages[0].get("extract", "") or ""
