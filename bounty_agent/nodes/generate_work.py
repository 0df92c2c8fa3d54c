"""
Node: generate_work

Asks the LLM for the work plan of a claimed bounty. Errors are not caught
here: they abort the cycle and surface in the agent loop.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_act
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def generate_work(state: CycleState, agent: BountyAgent) -> dict:
    """[4/5] Generate work for the claimed bounty."""
    bounty = state["current"]
    log_act(f"[4/5] Generating work for bounty #{bounty.id}...", agent.name)
    return {"work_plan": agent.generate_work_plan(bounty)}
