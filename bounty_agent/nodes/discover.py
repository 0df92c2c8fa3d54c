"""
Node: discover

Fetches open bounties and drops any the agent has already claimed,
completed or skipped.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_think, log_wait
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def discover(state: CycleState, agent: BountyAgent) -> dict:
    """[1/5] Fetch new open bounties."""
    log_think("[1/5] Discovering open bounties...", agent.name)
    bounties = agent.discover_bounties()
    log_think(f"Found {len(bounties)} new open bounties", agent.name)

    if not bounties:
        log_wait("No new bounties to process.", agent.name)

    return {"bounties": bounties}
