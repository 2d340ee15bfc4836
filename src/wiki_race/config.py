import os
from typing import Literal
from pydantic import BaseModel, Field, model_validator

class NavigatorConfig(BaseModel):
    """Configuration for navigators and the oracle they query."""

    # Strategy selection
    strategy: Literal["greedy", "frontier"] = "greedy"

    # Greedy walk settings
    max_attempts: int = Field(15, ge=1, description="Maximum hops the greedy walk may take")
    candidate_limit: int = Field(10, ge=1, description="Top-scored links kept per step")
    weighted_selection: bool = Field(True, description="Draw the next hop by score weight instead of taking the best")
    step_delay_min: float = Field(1.0, ge=0.0, description="Lower bound of the pause between steps in seconds")
    step_delay_max: float = Field(2.5, ge=0.0, description="Upper bound of the pause between steps in seconds")

    # Frontier search settings
    depth_cap: int = Field(6, ge=1, description="Maximum hops of any path the frontier search expands to")
    frontier_top_k: int = Field(10, ge=1, description="Children enqueued per expanded article")
    expansion_delay: float = Field(0.5, ge=0.0, description="Pause between frontier expansions in seconds")

    # Oracle settings
    language: str = "en"
    oracle_timeout: float = Field(10.0, gt=0.0, description="Per-request timeout for the live API in seconds")
    cache_oracle: bool = Field(True, description="Remember oracle answers for the lifetime of the adapter")
    user_agent: str = "wiki-race/0.1 (https://github.com/wiki-race/wiki-race)"

    @model_validator(mode="after")
    def delay_range_must_be_ordered(self) -> "NavigatorConfig":
        if self.step_delay_max < self.step_delay_min:
            raise ValueError("step_delay_max must be greater than or equal to step_delay_min")
        return self

    @classmethod
    def from_env(cls) -> "NavigatorConfig":
        """Create config from environment variables."""
        return cls(
            strategy=os.getenv("WIKI_RACE_STRATEGY", "greedy"),
            max_attempts=int(os.getenv("WIKI_RACE_MAX_ATTEMPTS", "15")),
            candidate_limit=int(os.getenv("WIKI_RACE_CANDIDATE_LIMIT", "10")),
            weighted_selection=os.getenv("WIKI_RACE_WEIGHTED_SELECTION", "true").lower() == "true",
            step_delay_min=float(os.getenv("WIKI_RACE_STEP_DELAY_MIN", "1.0")),
            step_delay_max=float(os.getenv("WIKI_RACE_STEP_DELAY_MAX", "2.5")),
            depth_cap=int(os.getenv("WIKI_RACE_DEPTH_CAP", "6")),
            frontier_top_k=int(os.getenv("WIKI_RACE_FRONTIER_TOP_K", "10")),
            expansion_delay=float(os.getenv("WIKI_RACE_EXPANSION_DELAY", "0.5")),
            language=os.getenv("WIKI_RACE_LANGUAGE", "en"),
            oracle_timeout=float(os.getenv("WIKI_RACE_ORACLE_TIMEOUT", "10.0")),
            cache_oracle=os.getenv("WIKI_RACE_CACHE_ORACLE", "true").lower() == "true",
        )
