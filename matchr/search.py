from __future__ import annotations

import logging
from collections.abc import Iterable

from matchr.models import MatchPositions, MatchResult, Score

logger = logging.getLogger(__name__)

MAX_SCORE = 100
MIN_MATCH_SCORE = 1
POSITION_WEIGHT_CAP = 10
ADJACENCY_BONUS_DIVISOR = 10
# Approximate best case per query character: full positional weight plus bonus.
PER_CHARACTER_CEILING = 15


def match_positions(query: str, candidate: str) -> MatchPositions | None:
    """Greedily align ``query`` against ``candidate``, left to right.

    Each query character consumes the first equal candidate character after
    the previous match. Returns the matched candidate indices, or ``None`` when
    ``query`` is not a subsequence of ``candidate``.
    """
    positions: list[int] = []
    cursor = -1
    for char in query:
        index = candidate.find(char, cursor + 1)
        if index == -1:
            return None
        positions.append(index)
        cursor = index
    return tuple(positions)


def is_subsequence(query: str, candidate: str) -> bool:
    return match_positions(query, candidate) is not None


def score(query: str, candidate: str) -> Score:
    """Score a candidate against a query; 0 means no match, 100 an exact one.

    The query must be a subsequence of the candidate. Every matched character
    is worth up to 10 points depending on how early it sits in the candidate,
    and a match directly following the previous one adds a tenth of the
    running raw score. The raw score is normalized against 15 points per query
    character and clamped to [1, 100].
    """
    if not query:
        return 0

    positions = match_positions(query, candidate)
    if positions is None:
        return 0

    if query == candidate:
        return MAX_SCORE

    raw_score = 0
    previous = -1
    for position in positions:
        raw_score += max(0, POSITION_WEIGHT_CAP - position)
        if previous != -1 and position == previous + 1:
            raw_score += raw_score // ADJACENCY_BONUS_DIVISOR
        previous = position

    max_possible = len(query) * PER_CHARACTER_CEILING
    # A subsequence always counts as a match, however late it lands.
    return max(MIN_MATCH_SCORE, min(MAX_SCORE, raw_score * 100 // max_possible))


def match_items(query: str, candidates: Iterable[str]) -> list[MatchResult]:
    """Rank ``candidates`` by descending score, dropping non-matches.

    Candidates with equal scores keep their input order.
    """
    scored_results: list[MatchResult] = []
    total = 0
    for candidate in candidates:
        total += 1
        candidate_score = score(query, candidate)
        if candidate_score > 0:
            scored_results.append((candidate, candidate_score))

    # list.sort is stable, so ties keep input order.
    scored_results.sort(key=lambda item: item[1], reverse=True)
    logger.debug(
        "Matched %d of %d candidates against %r", len(scored_results), total, query
    )
    return scored_results
