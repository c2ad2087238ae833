from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from matchr.models import MatchPositions, MatchResult, Score
from matchr.search import match_positions


def format_score(value: Score) -> str:
    return f"{value:>3}"


def highlight_match(
    candidate: str, positions: MatchPositions, *, style: str = "bold red"
) -> Text:
    text = Text(candidate)
    for position in positions:
        text.stylize(style, position, position + 1)
    return text


def render_results(
    query: str,
    results: Iterable[MatchResult],
    *,
    show_scores: bool = False,
) -> list[Text]:
    lines: list[Text] = []
    for candidate, candidate_score in results:
        line = highlight_match(candidate, match_positions(query, candidate) or ())
        if show_scores:
            line = Text.assemble((format_score(candidate_score), "dim"), "  ", line)
        lines.append(line)
    return lines
