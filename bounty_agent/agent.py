"""
Bounty Hunter Agent — Orchestrator

Drives the hunt cycle (discover → evaluate → claim → work → submit) and the
autonomous polling loop around it. Policy (confidence threshold, reward
ceiling, per-cycle cap) lives here; judgment lives in the evaluator.
"""

from __future__ import annotations

import time
import traceback
from typing import Callable, Optional

import httpx

from bounty_agent.base_agent import (
    log_act,
    log_err,
    log_ok,
    log_think,
    log_wait,
    log_warn,
    mask_wallet,
)
from bounty_agent.client import BountyClient
from bounty_agent.evaluator import BountyEvaluator, ChatModel
from bounty_agent.graph import build_graph, recursion_limit
from bounty_agent.llm import OpenRouterClient
from bounty_agent.models import (
    AgentConfig,
    AgentState,
    Bounty,
    EvaluationResult,
    SubmissionResult,
)


class BountyAgent:
    """Autonomous bounty hunter. State is in-memory and per instance."""

    name = "Agent"

    def __init__(
        self,
        config: AgentConfig,
        client: Optional[BountyClient] = None,
        llm: Optional[ChatModel] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.client = client or BountyClient(config.api_base)
        self.evaluator = BountyEvaluator(
            llm or OpenRouterClient(config.openrouter_api_key, config.model)
        )
        self.state = AgentState()
        self._sleep = sleep
        self._graph = build_graph(self)

    # ── Discovery ───────────────────────────────────────────────────────────

    def discover_bounties(self) -> list[Bounty]:
        """Open bounties not yet claimed, completed or skipped."""
        bounties = self.client.list_open_bounties()
        return [b for b in bounties if not self.state.tracked(b.id)]

    # ── Capability matching ─────────────────────────────────────────────────

    def evaluate_bounty(self, bounty: Bounty) -> EvaluationResult:
        return self.evaluator.evaluate(bounty, self.config.skills)

    # ── Claim flow ──────────────────────────────────────────────────────────

    def claim_bounty(self, bounty_id: str) -> bool:
        """Claim a bounty. Returns False (and logs) when the claim fails."""
        if self.config.dry_run:
            log_act(f"[DRY RUN] Would claim bounty #{bounty_id}", self.name)
            self.state.claimed.add(bounty_id)
            return True

        try:
            result = self.client.claim_bounty(bounty_id, self.config.wallet_address)
        except (httpx.HTTPError, ValueError) as e:
            log_err(f"Failed to claim bounty #{bounty_id}: {e}", self.name)
            return False

        log_ok(f"Claimed bounty #{bounty_id}: {result.get('status')}", self.name)
        self.state.claimed.add(bounty_id)
        return True

    # ── Work generation ─────────────────────────────────────────────────────

    def generate_work_plan(self, bounty: Bounty) -> str:
        return self.evaluator.generate_work_plan(bounty)

    # ── Submission ──────────────────────────────────────────────────────────

    def build_proof_url(self, bounty_id: str) -> str:
        # Placeholder link; nothing checks that it resolves.
        return f"https://github.com/{self.config.wallet_address[:8]}/bounty-{bounty_id}"

    def submit_work(self, bounty_id: str, submission: str, proof: str) -> SubmissionResult:
        """Submit work for a bounty. Failures are returned as an "error: ..." status."""
        if self.config.dry_run:
            log_act(f"[DRY RUN] Would submit for bounty #{bounty_id}", self.name)
            self.state.completed.add(bounty_id)
            return SubmissionResult(bounty_id, submission, proof, "dry_run")

        try:
            result = self.client.submit_bounty(
                bounty_id, self.config.wallet_address, submission, proof
            )
        except (httpx.HTTPError, ValueError) as e:
            log_err(f"Failed to submit bounty #{bounty_id}: {e}", self.name)
            return SubmissionResult(bounty_id, submission, proof, f"error: {e}")

        status = str(result.get("status", ""))
        log_ok(f"Submitted work for bounty #{bounty_id}: {status}", self.name)
        self.state.completed.add(bounty_id)
        return SubmissionResult(bounty_id, submission, proof, status)

    # ── Full autonomous loop ────────────────────────────────────────────────

    def run_cycle(self) -> list[SubmissionResult]:
        """Run one cycle: discover → evaluate → claim → work → submit."""
        print(f"\n{'='*60}")
        print("  Bounty Hunt Cycle")
        print(f"  Model: {self.config.model}")
        print(f"  Wallet: {mask_wallet(self.config.wallet_address)}")
        print(f"  Dry run: {self.config.dry_run}")
        print(f"{'='*60}", flush=True)

        result = self._graph.invoke(
            {"submissions": []},
            config={"recursion_limit": recursion_limit(self.config.max_evaluations_per_cycle)},
        )
        return result.get("submissions", [])

    def start_loop(self) -> None:
        """Run cycles until stop() is called, waiting poll_interval between them."""
        if self.state.is_running:
            log_warn("Agent is already running.", self.name)
            return

        self.state.is_running = True
        interval_s = self.config.poll_interval / 1000
        log_think("Starting autonomous bounty hunting loop...", self.name)
        log_think(f"Poll interval: {interval_s:g}s", self.name)

        while self.state.is_running:
            try:
                self.run_cycle()
            except Exception as exc:
                log_err(f"Cycle error: {exc}", self.name)
                log_err(traceback.format_exc().strip().splitlines()[-1], self.name)

            log_wait(f"Sleeping {interval_s:g}s...", self.name)
            self._sleep(interval_s)

    def stop(self) -> None:
        """Stop after the current cycle and its wait finish."""
        self.state.is_running = False
        log_warn("Stopping agent...", self.name)

    def get_state(self) -> dict:
        return self.state.snapshot()

    def close(self) -> None:
        """Release the board and LLM HTTP connections."""
        self.client.close()
        close_llm = getattr(self.evaluator.llm, "close", None)
        if close_llm is not None:
            close_llm()
