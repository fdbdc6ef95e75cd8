"""
Evaluation module for Termsweeper agents.

Provides episode rollouts and agent comparison.
"""
from .evaluator import EpisodeStats, Evaluator

__all__ = [
    "EpisodeStats",
    "Evaluator",
]
