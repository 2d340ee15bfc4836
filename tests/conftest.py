"""
Pytest configuration and shared fixtures for navigator testing.
"""

import pytest
import random
import logging
from typing import List

from wiki_race import EventBus
from wiki_race.adapters import StaticLinkOracle
from wiki_race.config import NavigatorConfig
from wiki_race.models import NavigationStep

# Configure logging for tests
logging.basicConfig(level=logging.INFO)


class FixedRandom(random.Random):
    """Random source whose random() always returns the same value."""

    def __init__(self, value: float = 0.0):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def event_bus() -> EventBus:
    """Create a fresh EventBus for each test."""
    return EventBus()

@pytest.fixture
def fast_config() -> NavigatorConfig:
    """Navigator configuration without pacing delays."""
    return NavigatorConfig(step_delay_min=0.0, step_delay_max=0.0, expansion_delay=0.0)

@pytest.fixture
def deterministic_config(fast_config: NavigatorConfig) -> NavigatorConfig:
    """Fast configuration that always follows the best-scored link."""
    return fast_config.model_copy(update={"weighted_selection": False})

@pytest.fixture
def make_rng():
    """Factory for random sources pinned to a single random() value."""
    return FixedRandom

@pytest.fixture
def fixed_rng() -> FixedRandom:
    return FixedRandom(0.0)

@pytest.fixture
def recorded_steps() -> List[NavigationStep]:
    """A list to collect on_step callbacks into."""
    return []

@pytest.fixture
def small_graph() -> dict:
    """A start article one hop away from the goal."""
    return {
        "A": ["B", "Goal"],
        "B": ["A"],
    }

@pytest.fixture
def small_oracle(small_graph: dict) -> StaticLinkOracle:
    return StaticLinkOracle(small_graph)

@pytest.fixture
def empty_oracle() -> StaticLinkOracle:
    """An oracle that knows no article at all."""
    return StaticLinkOracle({})

@pytest.fixture
def food_graph() -> dict:
    """A small realistic graph with a three-hop route from Ice cream to Ancient Rome."""
    return {
        "Ice cream": ["Dessert", "Milk", "History of ice cream", "Category:Frozen desserts", "Sugar"],
        "History of ice cream": ["Persia", "Rome", "Ice cream"],
        "Rome": ["Ancient Rome", "Italy", "Latin"],
        "Dessert": ["Cake", "Ice cream"],
        "Milk": ["Cow", "Cheese"],
        "Sugar": ["Sugarcane"],
        "Persia": ["Iran"],
    }

@pytest.fixture
def food_oracle(food_graph: dict) -> StaticLinkOracle:
    return StaticLinkOracle(
        food_graph,
        extracts={
            "Ice cream": "Ice cream is a frozen treat. The history of ice cream reaches back to ancient times.",
            "History of ice cream": "Frozen treats were known in Persia and in Rome.",
        },
    )

@pytest.fixture
def chain_graph() -> dict:
    """Node 0 -> Node 1 -> ... -> Node 20, with no way to the goal."""
    return {f"Node {i}": [f"Node {i + 1}"] for i in range(20)}
