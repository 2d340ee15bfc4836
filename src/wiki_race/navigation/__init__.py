# Path-finding strategies and their factory
import random
from typing import Dict, Optional, Type

from wiki_race.capabilities.link_oracle import ILinkOracle
from wiki_race.config import NavigatorConfig
from wiki_race.events import EventBus
from wiki_race.exceptions import UnknownStrategyError
from .navigator import Navigator, StepCallback
from .greedy import GreedyWalkNavigator
from .frontier import FrontierSearchNavigator
from .hints import suggest_links
from .scoring import score_candidate, rank_candidates

STRATEGIES: Dict[str, Type[Navigator]] = {
    "greedy": GreedyWalkNavigator,
    "frontier": FrontierSearchNavigator,
}

def create_navigator(
    start_title: str,
    goal_title: str,
    oracle: ILinkOracle,
    strategy: Optional[str] = None,
    on_step: Optional[StepCallback] = None,
    config: Optional[NavigatorConfig] = None,
    rng: Optional[random.Random] = None,
    event_bus: Optional[EventBus] = None,
) -> Navigator:
    """
    Create a navigator for one (start, goal) pair.

    Args:
        strategy: Key in STRATEGIES; defaults to ``config.strategy``
        config: Budgets, delays and selection settings shared by all strategies

    Example:
        navigator = create_navigator("Ice cream", "Ancient Rome", oracle, strategy="frontier")
        path = await navigator.run()
    """
    config = config or NavigatorConfig()
    strategy = strategy or config.strategy

    if strategy not in STRATEGIES:
        available = list(STRATEGIES.keys())
        raise UnknownStrategyError(f"Unknown strategy '{strategy}'. Available: {available}")

    navigator_class = STRATEGIES[strategy]
    return navigator_class(
        start_title,
        goal_title,
        oracle,
        on_step=on_step,
        config=config,
        rng=rng,
        event_bus=event_bus,
    )

__all__ = [
    "Navigator",
    "StepCallback",
    "GreedyWalkNavigator",
    "FrontierSearchNavigator",
    "STRATEGIES",
    "create_navigator",
    "suggest_links",
    "score_candidate",
    "rank_candidates",
]
