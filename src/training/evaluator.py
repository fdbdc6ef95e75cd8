"""
Evaluation module for Termsweeper agents.

Plays agents through the environment and aggregates their results.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from termsweeper.board import BoardConfig
from termsweeper.environment import TermsweeperEnv
from agents.base_agent import BaseAgent


# ============================================================================
# Episode Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single episode."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    lost: bool = False
    revealed_cells: int = 0


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate and compare multiple agents.

    Every agent sees the same sequence of boards when a seed is given.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 2000,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of evaluation episodes.
            max_steps: Maximum commands per episode before truncation.
            seed: Seed for the first episode; later ones follow on.
        """
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def run_episode(
        self,
        agent: BaseAgent,
        env: TermsweeperEnv,
        seed: Optional[int] = None,
    ) -> EpisodeStats:
        """Play one match to the end or to max_steps."""
        stats = EpisodeStats()
        observation, info = env.reset(seed=seed)
        agent.reset()

        for _ in range(self.max_steps):
            valid_actions = env.get_action_mask()
            action = agent.select_action(observation, valid_actions)
            observation, reward, terminated, truncated, info = env.step(action)

            stats.total_reward += float(reward)
            stats.steps += 1

            if terminated or truncated:
                break

        stats.won = info["game_state"] == "WON"
        stats.lost = info["game_state"] == "GAME_OVER"
        stats.revealed_cells = info["revealed"]
        return stats

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Args:
            agent: Agent to evaluate.

        Returns:
            Dictionary with evaluation metrics.
        """
        env = TermsweeperEnv(config=self.board_config)
        episodes = [
            self.run_episode(
                agent,
                env,
                seed=None if self.seed is None else self.seed + episode,
            )
            for episode in range(self.num_episodes)
        ]

        return {
            "win_rate": sum(e.won for e in episodes) / self.num_episodes,
            "loss_rate": sum(e.lost for e in episodes) / self.num_episodes,
            "avg_reward": sum(e.total_reward for e in episodes) / self.num_episodes,
            "avg_steps": sum(e.steps for e in episodes) / self.num_episodes,
            "avg_revealed": sum(e.revealed_cells for e in episodes) / self.num_episodes,
        }

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results
