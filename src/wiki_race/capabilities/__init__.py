from .link_oracle import ILinkOracle

__all__ = ["ILinkOracle"]
