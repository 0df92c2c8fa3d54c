"""
Node: submit

Submits the generated work with a proof link and records the result.
Submit failures come back as an "error: ..." status, never raised.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_act
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def submit(state: CycleState, agent: BountyAgent) -> dict:
    """[5/5] Submit work for the claimed bounty."""
    bounty = state["current"]
    log_act(f"[5/5] Submitting work for bounty #{bounty.id}...", agent.name)

    proof = agent.build_proof_url(bounty.id)
    result = agent.submit_work(bounty.id, state.get("work_plan", ""), proof)

    return {"submissions": [*state.get("submissions", []), result]}
