from matchr.search import is_subsequence, match_items, match_positions, score

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "is_subsequence",
    "match_items",
    "match_positions",
    "score",
]
