"""
Termsweeper agents module.

Provides agents that play Termsweeper through cursor commands:
- RandomAgent: Baseline random command selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
