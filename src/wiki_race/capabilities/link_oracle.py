"""
Link Oracle Capability Interface

Defines what the navigators need from the article graph without coupling
them to the live API, a cache or a fixture graph.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ILinkOracle(ABC):
    """
    Link oracle interface.

    Implementations never raise on lookup failures: a missing article, a
    network error or a malformed response all come back as an empty result.
    """

    @abstractmethod
    async def fetch_links(self, page_title: str) -> List[str]:
        """
        Get the outbound links of an article.

        Args:
            page_title: The title of the article to look up

        Returns:
            Ordered link titles without namespaced entries; empty on failure
        """
        pass

    @abstractmethod
    async def fetch_extract(self, page_title: str) -> str:
        """
        Get a short plain-text summary of an article.

        Args:
            page_title: The title of the article to look up

        Returns:
            The extract, or an empty string on failure
        """
        pass

    @abstractmethod
    def get_capability_info(self) -> Dict[str, Any]:
        """
        Get information about this oracle.

        Returns:
            Dictionary with oracle metadata (implementation type, features, etc.)
        """
        pass
