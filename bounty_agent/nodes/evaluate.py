"""
Node: evaluate

Judges the first few discovered bounties, one at a time and in list order.
Unsuitable bounties are skipped for the rest of the process lifetime;
suitable ones above the confidence threshold are queued for claiming.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from bounty_agent.base_agent import log_act, log_think
from bounty_agent.state import CycleState

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent


def evaluate(state: CycleState, agent: BountyAgent) -> dict:
    """[2/5] Evaluate a capped batch of bounties."""
    config = agent.config
    batch = state.get("bounties", [])[: config.max_evaluations_per_cycle]

    log_think(f"[2/5] Evaluating {len(batch)} bounties...", agent.name)

    evaluations = []
    for bounty in batch:
        evaluation = agent.evaluate_bounty(bounty)
        evaluations.append((bounty, evaluation))

        verdict = "MATCH" if evaluation.suitable else "SKIP"
        log_think(
            f"  #{bounty.id} \"{bounty.title}\" -> {verdict} "
            f"({round(evaluation.confidence * 100)}% confidence)",
            agent.name,
        )

        if not evaluation.suitable:
            agent.state.skipped.add(bounty.id)

    queue = [
        bounty for bounty, evaluation in evaluations
        if evaluation.suitable and evaluation.confidence >= config.confidence_threshold
    ]
    log_act(f"[3/5] Claiming {len(queue)} suitable bounties...", agent.name)

    return {"evaluations": evaluations, "queue": queue}
