"""
Relevance scoring for candidate links.

Scores are word-overlap heuristics over titles: no graph knowledge is
needed, only the candidate title, the goal title and optionally the text
extract of the article the candidate was found on. The weights are tuned so
that an exact match beats any lexical overlap, overlap beats everything
unrelated, and structural noise sinks to the bottom.
"""

import random
from typing import Iterable, List, Optional, Sequence

from wiki_race.models import ScoredCandidate
from wiki_race.utils.wiki_helpers import (
    is_namespaced,
    is_structural_noise,
    title_key,
    unique_titles,
)

EXACT_MATCH_BONUS = 1000
WORD_MATCH_BONUS = 100
PARTIAL_WORD_BONUS = 50
CONTEXT_BONUS = 30
GENERALITY_BONUS = 20
HUB_TOPIC_BONUS = 15
STRUCTURAL_PENALTY = 50

GENERAL_TITLE_MAX_LENGTH = 20
MIN_WORD_LENGTH = 3

# Function words carry no topical signal and appear in most long titles
STOPWORDS = frozenset({
    "a", "an", "and", "at", "by", "de", "for", "in", "of", "on", "or", "the", "to",
})

HUB_TOPICS = (
    "history", "culture", "science", "art", "music", "literature",
    "philosophy", "politics", "geography", "religion", "technology",
    "society", "people", "world", "international", "modern", "ancient",
)

BROAD_TOPICS = ("history", "culture", "society", "world", "international", "general")


def _significant_words(title: str) -> List[str]:
    words = (word.strip("()[],.;:'\"") for word in title_key(title).split())
    return [word for word in words if word and word not in STOPWORDS]


def word_overlap_score(candidate: str, goal: str) -> int:
    """
    Score the lexical overlap between two titles, word pair by word pair.

    Equal words always count, however short ("Go" and "Go (game)"). Substring
    matches need both words to be at least MIN_WORD_LENGTH long, otherwise
    "ai" would match every title containing "rain" or "chair".
    """
    score = 0
    candidate_words = _significant_words(candidate)
    for goal_word in _significant_words(goal):
        for candidate_word in candidate_words:
            if candidate_word == goal_word:
                score += WORD_MATCH_BONUS
            elif min(len(candidate_word), len(goal_word)) < MIN_WORD_LENGTH:
                continue
            elif candidate_word in goal_word or goal_word in candidate_word:
                score += PARTIAL_WORD_BONUS
    return score


def is_general_title(candidate: str) -> bool:
    """Short titles without qualifiers tend to be well-linked hub articles."""
    return len(candidate) < GENERAL_TITLE_MAX_LENGTH and "(" not in candidate and "," not in candidate


def mentions_hub_topic(candidate: str) -> bool:
    lowered = title_key(candidate)
    return any(topic in lowered for topic in HUB_TOPICS)


def score_candidate(candidate: str, goal: str, context_text: Optional[str] = None) -> int:
    """
    Score how promising ``candidate`` is as the next hop toward ``goal``.

    Args:
        candidate: The link title being considered.
        goal: The goal article title.
        context_text: Extract of the current article, if available.

    Returns:
        A non-negative integer; higher is more promising.
    """
    lowered = title_key(candidate)
    score = 0

    if lowered == title_key(goal):
        score += EXACT_MATCH_BONUS

    score += word_overlap_score(candidate, goal)

    if context_text and lowered and lowered in context_text.lower():
        score += CONTEXT_BONUS

    if is_general_title(candidate):
        score += GENERALITY_BONUS

    if is_structural_noise(candidate):
        score -= STRUCTURAL_PENALTY

    if mentions_hub_topic(candidate):
        score += HUB_TOPIC_BONUS

    return max(0, score)


def rank_candidates(
    links: Iterable[str],
    goal: str,
    context_text: Optional[str] = None,
    exclude: Iterable[str] = (),
    limit: Optional[int] = None,
) -> List[ScoredCandidate]:
    """
    Score a LinkSet and return the usable candidates best first.

    Namespaced titles, case-insensitive duplicates and titles whose key is in
    ``exclude`` are dropped. The sort is stable so equal scores keep the
    order the oracle returned them in.
    """
    excluded = {title_key(title) for title in exclude}
    candidates = [
        ScoredCandidate(article=link, score=score_candidate(link, goal, context_text))
        for link in unique_titles(links)
        if not is_namespaced(link) and title_key(link) not in excluded
    ]
    candidates.sort(key=lambda candidate: candidate.score, reverse=True)
    if limit is not None:
        candidates = candidates[:limit]
    return candidates


def broad_candidates(links: Iterable[str], exclude: Iterable[str] = ()) -> List[str]:
    """Filter a LinkSet down to broad titles useful for escaping a dead end."""
    excluded = {title_key(title) for title in exclude}
    broad = []
    for link in unique_titles(links):
        if is_namespaced(link) or title_key(link) in excluded:
            continue
        lowered = title_key(link)
        if any(topic in lowered for topic in BROAD_TOPICS):
            broad.append(link)
        elif len(link.split()) <= 2 and "(" not in link:
            broad.append(link)
    return broad


def weighted_choice(candidates: Sequence[ScoredCandidate], rng: random.Random) -> ScoredCandidate:
    """
    Draw a candidate with probability proportional to its score.

    When every score is zero the first (highest ranked) candidate is returned.
    """
    if not candidates:
        raise ValueError("weighted_choice requires at least one candidate")

    total = sum(candidate.score for candidate in candidates)
    if total == 0:
        return candidates[0]

    remaining = rng.random() * total
    for candidate in candidates:
        if remaining < candidate.score:
            return candidate
        remaining -= candidate.score
    return candidates[0]


def explain_choice(article: str, goal: str) -> str:
    """Describe why an article was chosen, from its dominant bonus category."""
    lowered = title_key(article)
    if lowered == title_key(goal):
        return f'Reached "{goal}"'
    if word_overlap_score(article, goal) > 0:
        return f'Found connection to "{goal}"'
    if "history" in lowered:
        return "Exploring historical connections"
    if "culture" in lowered or "society" in lowered:
        return "Following cultural pathways"
    return "Strategic navigation choice"
