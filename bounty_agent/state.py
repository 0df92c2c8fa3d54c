"""
CycleState — the shared state object flowing through one hunt cycle's graph.

Each node reads from and writes back to this TypedDict. It lives for a
single cycle; cross-cycle memory is the agent's AgentState.
"""

from __future__ import annotations
from typing import Optional
from typing_extensions import TypedDict

from bounty_agent.models import Bounty, EvaluationResult, SubmissionResult


class CycleState(TypedDict, total=False):
    # ── Discovery (populated by discover node) ────────────────────────────────
    bounties: list[Bounty]

    # ── Judgments (populated by evaluate node) ────────────────────────────────
    evaluations: list[tuple[Bounty, EvaluationResult]]
    queue: list[Bounty]  # suitable + confident, not yet claimed

    # ── Current bounty (populated by next_bounty / claim / generate_work) ─────
    current: Optional[Bounty]
    claimed: bool
    work_plan: str

    # ── Results (appended by submit node) ─────────────────────────────────────
    submissions: list[SubmissionResult]
