import pytest

from wiki_race.adapters import StaticLinkOracle
from wiki_race.navigation import suggest_links


@pytest.mark.unit
class TestSuggestLinks:
    """Link hints for a human player."""

    @pytest.mark.asyncio
    async def test_best_links_first(self, food_oracle):
        hints = await suggest_links(food_oracle, "History of ice cream", "Ancient Rome")

        assert hints[0].article == "Rome"
        assert [h.score for h in hints] == sorted((h.score for h in hints), reverse=True)

    @pytest.mark.asyncio
    async def test_limit_and_exclude(self):
        oracle = StaticLinkOracle({"Hub": [f"Topic {i}" for i in range(10)]})

        hints = await suggest_links(oracle, "Hub", "Goal", limit=3, exclude=["topic 0"])

        assert [h.article for h in hints] == ["Topic 1", "Topic 2", "Topic 3"]

    @pytest.mark.asyncio
    async def test_default_limit_is_five(self):
        oracle = StaticLinkOracle({"Hub": [f"Topic {i}" for i in range(10)]})

        hints = await suggest_links(oracle, "Hub", "Goal")

        assert len(hints) == 5

    @pytest.mark.asyncio
    async def test_unknown_article_has_no_hints(self, empty_oracle):
        assert await suggest_links(empty_oracle, "Nowhere", "Goal") == []

    @pytest.mark.asyncio
    async def test_does_not_use_extracts(self, food_oracle):
        await suggest_links(food_oracle, "Ice cream", "Ancient Rome")

        assert food_oracle.calls == [("links", "Ice cream")]
