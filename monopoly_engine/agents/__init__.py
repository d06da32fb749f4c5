from monopoly_engine.agents.base import Agent
from monopoly_engine.agents.greedy import GreedyCpuAgent

__all__ = [
    "Agent",
    "GreedyCpuAgent",
]
