"""
Bounty Evaluator — the agent's brain.

  1. Asks the LLM whether a bounty matches the agent's skills
  2. Asks the LLM for a work completion plan for a claimed bounty

Evaluation fails closed: any error while calling the LLM or parsing its
reply becomes a "not suitable" judgment. Work-plan errors propagate.
"""

from __future__ import annotations

import json
from typing import Protocol

from bounty_agent.base_agent import FALLBACK_SKILL, log_err, log_warn
from bounty_agent.models import Bounty, EvaluationResult

AGENT_NAME = "Evaluator"

EVALUATION_SYSTEM = "You are an AI agent that evaluates bounty suitability. Always respond with valid JSON."

EVALUATION_PROMPT = """\
You are an AI agent evaluating whether to work on a bounty. Analyze the bounty and determine if the given skills are sufficient.

Agent skills: {skills}

Bounty details:
- Title: {title}
- Description: {description}
- Tags: {tags}
- Reward: {reward}

Respond in JSON format only:
{{
  "suitable": true/false,
  "confidence": 0.0-1.0,
  "reasoning": "brief explanation",
  "estimatedEffort": "low/medium/high"
}}"""

WORK_PLAN_SYSTEM = (
    "You are an AI agent completing bounty work. "
    "Provide a clear, detailed description of the work you would do to complete this bounty."
)

WORK_PLAN_PROMPT = """\
Generate a detailed work completion plan for this bounty:

Title: {title}
Description: {description}
Tags: {tags}
Reward: {reward}

Describe what you built/completed and how it meets the requirements. Be specific and professional."""


class ChatModel(Protocol):
    def chat(self, messages: list[dict]) -> str: ...


def extract_json(raw: str) -> dict | None:
    """Parse the span from the first '{' to the last '}' of an LLM reply."""
    if not isinstance(raw, str) or not raw:
        return None
    first_brace = raw.find("{")
    last_brace = raw.rfind("}")
    if first_brace == -1 or last_brace < first_brace:
        return None
    try:
        data = json.loads(raw[first_brace : last_brace + 1])
    except (ValueError, RecursionError) as e:
        log_warn(f"JSON extract failed: {e}", AGENT_NAME)
        return None
    return data if isinstance(data, dict) else None


def _bounty_fields(bounty: Bounty) -> dict:
    return {
        "title": bounty.title,
        "description": bounty.description or "No description",
        "tags": ", ".join(bounty.tags),
        "reward": bounty.reward_formatted,
    }


class BountyEvaluator:
    """Judges bounties and writes work plans by delegating to a chat model."""

    def __init__(self, llm: ChatModel):
        self.llm = llm

    def evaluate(self, bounty: Bounty, skills: list[str]) -> EvaluationResult:
        """THINK: can these skills deliver this bounty?"""
        prompt = EVALUATION_PROMPT.format(
            skills=", ".join(skills) or FALLBACK_SKILL,
            **_bounty_fields(bounty),
        )

        try:
            raw = self.llm.chat([
                {"role": "system", "content": EVALUATION_SYSTEM},
                {"role": "user", "content": prompt},
            ])
        except Exception as e:
            log_err(f"Evaluation error for bounty #{bounty.id}: {e}", AGENT_NAME)
            return EvaluationResult.rejected(f"Evaluation error: {e}")

        try:
            data = extract_json(raw)
            result = None if data is None else EvaluationResult.from_dict(data)
        except Exception as e:
            log_err(f"Evaluation parse error for bounty #{bounty.id}: {e}", AGENT_NAME)
            result = None

        if result is None:
            log_warn(f"Could not parse evaluation for bounty #{bounty.id}", AGENT_NAME)
            return EvaluationResult.rejected("Failed to parse AI evaluation")
        return result

    def generate_work_plan(self, bounty: Bounty) -> str:
        """Return the LLM's work completion plan verbatim."""
        return self.llm.chat([
            {"role": "system", "content": WORK_PLAN_SYSTEM},
            {"role": "user", "content": WORK_PLAN_PROMPT.format(**_bounty_fields(bounty))},
        ])
