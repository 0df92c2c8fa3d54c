"""
Node: select_bounty

Pops the next queued bounty that is within the reward ceiling. Bounties
over the ceiling are passed over without being recorded anywhere, so a
later cycle may consider them again.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_warn
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def select_bounty(state: CycleState, agent: BountyAgent) -> dict:
    config = agent.config
    queue = list(state.get("queue", []))

    while queue:
        bounty = queue.pop(0)
        reward = bounty.reward_units(config.reward_scale)
        if reward > config.max_reward:
            log_warn(
                f"  Skipping #{bounty.id}: reward {reward:g} USDC exceeds max {config.max_reward:g} USDC",
                agent.name,
            )
            continue
        return {"current": bounty, "queue": queue, "claimed": False, "work_plan": ""}

    return {"current": None, "queue": [], "claimed": False, "work_plan": ""}
