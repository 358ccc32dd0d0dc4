"""KIF shogi record parsing, branch-aware replay and variation trees."""

__version__ = "0.1.0"
