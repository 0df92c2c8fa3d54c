"""
Node: summarize

Logs the agent's running totals at the end of a cycle.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_ok
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def summarize(state: CycleState, agent: BountyAgent) -> dict:
    s = agent.state
    log_ok(
        f"Cycle complete. Claimed: {len(s.claimed)}  Completed: {len(s.completed)}  Skipped: {len(s.skipped)}",
        agent.name,
    )
    return {"current": None}
