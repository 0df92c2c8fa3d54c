"""
Node: claim

Claims the current bounty. A failed claim abandons the bounty for this
cycle; no work is generated for it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def claim(state: CycleState, agent: BountyAgent) -> dict:
    bounty = state["current"]
    return {"claimed": agent.claim_bounty(bounty.id)}
