"""Autonomous Bounty Board agent: discover, evaluate, claim, work, submit."""

from bounty_agent.agent import BountyAgent
from bounty_agent.client import BountyClient
from bounty_agent.evaluator import BountyEvaluator
from bounty_agent.llm import OpenRouterClient
from bounty_agent.models import (
    AgentConfig,
    AgentState,
    Bounty,
    BountyStats,
    EvaluationResult,
    SubmissionResult,
)

__all__ = [
    "AgentConfig",
    "AgentState",
    "Bounty",
    "BountyAgent",
    "BountyClient",
    "BountyEvaluator",
    "BountyStats",
    "EvaluationResult",
    "OpenRouterClient",
    "SubmissionResult",
]
