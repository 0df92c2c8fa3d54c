"""
Data models shared by the client, the evaluator and the agent loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from bounty_agent.base_agent import (
    CONFIDENCE_THRESHOLD,
    DEFAULT_API_BASE,
    DEFAULT_MAX_REWARD,
    DEFAULT_MODEL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_REWARD_SCALE,
    MAX_EVALUATIONS_PER_CYCLE,
)

EFFORT_LEVELS = ("low", "medium", "high")


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Payment:
    gross_amount: Optional[str] = None
    gross_reward: Optional[str] = None


@dataclass(frozen=True)
class Bounty:
    """A snapshot of one bounty as listed by the board."""

    id: str
    title: str
    description: str = ""
    status: str = ""
    reward: str = "0"
    reward_formatted: str = ""
    tags: tuple[str, ...] = ()
    claimed_by: Optional[str] = None
    created_at: Optional[str] = None
    completed_at: Optional[str] = None
    payment: Optional[Payment] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Bounty":
        payment = data.get("payment")
        if isinstance(payment, dict):
            payment = Payment(
                gross_amount=_opt_str(payment.get("grossAmount")),
                gross_reward=_opt_str(payment.get("grossReward")),
            )
        else:
            payment = None

        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            status=str(data.get("status") or ""),
            reward=str(data.get("reward") or "0"),
            reward_formatted=str(data.get("rewardFormatted") or ""),
            tags=tuple(str(t) for t in (data.get("tags") or [])),
            claimed_by=_opt_str(data.get("claimedBy")),
            created_at=_opt_str(data.get("createdAt")),
            completed_at=_opt_str(data.get("completedAt")),
            payment=payment,
        )

    def reward_units(self, scale: int = DEFAULT_REWARD_SCALE) -> float:
        """Reward in display units (minor units divided by ``scale``)."""
        try:
            return float(self.reward or 0) / scale
        except ValueError:
            return 0.0


@dataclass(frozen=True)
class BountyStats:
    total_bounties: int = 0
    open_bounties: int = 0
    completed_bounties: int = 0
    total_rewards_usdc: str = "0"

    @classmethod
    def from_dict(cls, data: dict) -> "BountyStats":
        return cls(
            total_bounties=int(data.get("totalBounties") or 0),
            open_bounties=int(data.get("openBounties") or 0),
            completed_bounties=int(data.get("completedBounties") or 0),
            total_rewards_usdc=str(data.get("totalRewardsUSDC") or "0"),
        )


@dataclass(frozen=True)
class EvaluationResult:
    suitable: bool
    confidence: float
    reasoning: str
    estimated_effort: str

    @classmethod
    def rejected(cls, reasoning: str) -> "EvaluationResult":
        """Fail-closed judgment: never act on a bounty we could not evaluate."""
        return cls(suitable=False, confidence=0.0, reasoning=reasoning, estimated_effort="high")

    @classmethod
    def from_dict(cls, data: dict) -> "EvaluationResult":
        suitable = data.get("suitable")
        if isinstance(suitable, str):
            suitable = suitable.strip().lower() == "true"
        else:
            suitable = suitable is True

        try:
            confidence = float(data.get("confidence", 0))
        except (TypeError, ValueError, OverflowError):
            confidence = 0.0
        if confidence != confidence:  # NaN
            confidence = 0.0
        confidence = min(max(confidence, 0.0), 1.0)

        effort = str(data.get("estimatedEffort") or "").strip().lower()
        if effort not in EFFORT_LEVELS:
            effort = "high"

        return cls(
            suitable=suitable,
            confidence=confidence,
            reasoning=str(data.get("reasoning") or ""),
            estimated_effort=effort,
        )


@dataclass(frozen=True)
class SubmissionResult:
    bounty_id: str
    submission: str
    proof: str
    status: str


@dataclass
class AgentConfig:
    """Static agent configuration, resolved once at construction."""

    openrouter_api_key: str
    wallet_address: str
    model: str = DEFAULT_MODEL
    skills: list[str] = field(default_factory=list)
    max_reward: float = DEFAULT_MAX_REWARD
    api_base: str = DEFAULT_API_BASE
    dry_run: bool = False
    poll_interval: int = DEFAULT_POLL_INTERVAL_MS  # milliseconds
    reward_scale: int = DEFAULT_REWARD_SCALE
    confidence_threshold: float = CONFIDENCE_THRESHOLD
    max_evaluations_per_cycle: int = MAX_EVALUATIONS_PER_CYCLE

    def __post_init__(self):
        missing = [
            name
            for name in ("openrouter_api_key", "wallet_address")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Missing required agent config: {', '.join(missing)}")
        if self.reward_scale <= 0:
            raise ValueError("reward_scale must be positive")


@dataclass
class AgentState:
    """Process-lifetime memory of bounties already handled. Sets only grow."""

    claimed: set[str] = field(default_factory=set)
    completed: set[str] = field(default_factory=set)
    skipped: set[str] = field(default_factory=set)
    is_running: bool = False

    def tracked(self, bounty_id: str) -> bool:
        return bounty_id in self.claimed or bounty_id in self.completed or bounty_id in self.skipped

    def snapshot(self) -> dict:
        return {
            "claimed": sorted(self.claimed),
            "completed": sorted(self.completed),
            "skipped": sorted(self.skipped),
            "running": self.is_running,
        }
