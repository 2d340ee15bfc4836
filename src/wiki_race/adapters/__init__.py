from .static_oracle import StaticLinkOracle
from .wiki_oracle import LiveLinkOracle

__all__ = ["StaticLinkOracle", "LiveLinkOracle"]
