"""
Tests for the relevance scoring heuristics.
"""

import pytest

from wiki_race.models import ScoredCandidate
from wiki_race.navigation.scoring import (
    CONTEXT_BONUS,
    EXACT_MATCH_BONUS,
    HUB_TOPIC_BONUS,
    broad_candidates,
    explain_choice,
    rank_candidates,
    score_candidate,
    weighted_choice,
    word_overlap_score,
)


@pytest.mark.unit
class TestScoreCandidate:

    def test_exact_match_is_case_insensitive(self):
        assert score_candidate("ice cream", "Ice Cream") >= EXACT_MATCH_BONUS

    def test_ordering_exact_overlap_unrelated_noise(self):
        goal = "Ancient Rome"
        exact = score_candidate("Ancient Rome", goal)
        overlap = score_candidate("Rome", goal)
        unrelated = score_candidate("Banana", goal)
        noise = score_candidate("List of bananas", goal)

        assert exact > overlap > unrelated > noise

    def test_one_shared_word_beats_any_unrelated_title(self):
        goal = "Quantum mechanics"
        overlap = score_candidate("Mechanics", goal)
        # Short, hub topic and mentioned in context: every bonus an unrelated title can collect
        unrelated = score_candidate("World art", goal, context_text="world art is nice")

        assert overlap > unrelated

    def test_partial_word_overlap_scores_below_full_word_match(self):
        goal = "Football"
        assert score_candidate("Foot", goal) < score_candidate("Football club", goal)
        assert word_overlap_score("Foot", goal) == 50
        assert word_overlap_score("Football club", goal) == 100

    def test_stopwords_and_short_substrings_do_not_count(self):
        # "of" would otherwise be a substring of "professor"
        assert word_overlap_score("Professor", "Isle of Man") == 0
        assert word_overlap_score("History of Spain", "Isle of Man") == 0
        assert word_overlap_score("Rain", "AI") == 0

    @pytest.mark.parametrize("candidate,goal,unrelated", [
        ("Go (game)", "Go", "Chess"),
        ("AI winter", "AI", "Snow"),
        ("Pi Day", "Pi", "Cake"),
        ("UK", "UK", "France"),
    ])
    def test_short_goal_words_still_match_exactly(self, candidate, goal, unrelated):
        assert word_overlap_score(candidate, goal) >= 100
        assert score_candidate(candidate, goal) > score_candidate(unrelated, goal)

    def test_punctuation_around_words_is_ignored(self):
        assert word_overlap_score("Go (game)", "Game") == 100

    def test_context_bonus(self):
        without = score_candidate("Milk", "Cheese")
        with_context = score_candidate("Milk", "Cheese", context_text="Cheese is made from milk.")
        assert with_context - without == CONTEXT_BONUS

    def test_hub_bonus_is_flat(self):
        single = score_candidate("Modern art and world history of science", "Zzz")
        # long title: no generality bonus, no overlap; only the flat hub bonus remains
        assert single == HUB_TOPIC_BONUS

    def test_never_negative(self):
        assert score_candidate("List of minor planets: 1001–2000, part (disambiguation)", "Zebra") == 0

    def test_namespaced_titles_are_penalised(self):
        assert score_candidate("Category:Rome", "Rome") < score_candidate("Rome", "Rome")


@pytest.mark.unit
class TestRankCandidates:

    def test_filters_namespaced_titles(self):
        ranked = rank_candidates(["Category:Foo", "Bar"], "Goal")
        assert [c.article for c in ranked] == ["Bar"]

    def test_drops_duplicates_and_excluded(self):
        ranked = rank_candidates(["Rome", "rome", "Paris", "Milan"], "Rome", exclude=["PARIS"])
        assert [c.article for c in ranked] == ["Rome", "Milan"]

    def test_sorted_descending_and_limited(self):
        ranked = rank_candidates(["Banana", "Ancient Rome", "Rome", "Apple"], "Ancient Rome", limit=2)
        assert [c.article for c in ranked] == ["Ancient Rome", "Rome"]
        assert ranked[0].score > ranked[1].score

    def test_ties_keep_link_order(self):
        ranked = rank_candidates(["Kiwi", "Mango", "Apple"], "Zebra")
        assert [c.article for c in ranked] == ["Kiwi", "Mango", "Apple"]

    def test_uses_context_text(self):
        ranked = rank_candidates(["Kiwi", "Mango"], "Zebra", context_text="The mango is a fruit.")
        assert ranked[0].article == "Mango"


@pytest.mark.unit
class TestBroadCandidates:

    def test_keeps_hub_and_short_titles(self):
        links = [
            "Economic history of Brazil",
            "Ice cream",
            "Zebra crossing (road)",
            "A very long specific title",
            "Category:World",
        ]
        assert broad_candidates(links) == ["Economic history of Brazil", "Ice cream"]

    def test_excludes_visited(self):
        assert broad_candidates(["World", "Culture"], exclude=["world"]) == ["Culture"]


@pytest.mark.unit
class TestWeightedChoice:

    @pytest.fixture
    def candidates(self):
        return [ScoredCandidate(article="a", score=3), ScoredCandidate(article="b", score=1)]

    def test_draw_follows_score_weights(self, candidates, make_rng):
        assert weighted_choice(candidates, make_rng(0.74)).article == "a"
        assert weighted_choice(candidates, make_rng(0.76)).article == "b"

    def test_zero_total_takes_first(self, make_rng):
        zeros = [ScoredCandidate(article="x", score=0), ScoredCandidate(article="y", score=0)]
        assert weighted_choice(zeros, make_rng(0.99)).article == "x"

    def test_empty_candidates_is_an_error(self, make_rng):
        with pytest.raises(ValueError):
            weighted_choice([], make_rng())


@pytest.mark.unit
class TestExplainChoice:

    @pytest.mark.parametrize("article,expected", [
        ("Ancient Rome", 'Reached "Ancient Rome"'),
        ("Rome Metro", 'Found connection to "Ancient Rome"'),
        ("History of Spain", "Exploring historical connections"),
        ("Culture of Spain", "Following cultural pathways"),
        ("Spain", "Strategic navigation choice"),
    ])
    def test_reasoning_categories(self, article, expected):
        assert explain_choice(article, "Ancient Rome") == expected
