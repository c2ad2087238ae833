from __future__ import annotations

Score = int
MatchResult = tuple[str, Score]
MatchPositions = tuple[int, ...]
