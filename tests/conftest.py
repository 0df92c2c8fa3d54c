"""Shared test fixtures: an in-memory Bounty Board and a scripted LLM."""

from __future__ import annotations

import json
import re

import httpx
import pytest

from bounty_agent.agent import BountyAgent
from bounty_agent.client import BountyClient
from bounty_agent.models import AgentConfig

BOARD_URL = "https://board.test"
WALLET = "0xABCDEF1234567890abcdef"

_MUTATION = re.compile(r"/bounties/([^/]+)/(claim|submit)")


def bounty_dict(id="1", title="Fix bug", status="open", reward="50000000", **extra) -> dict:
    data = {
        "id": id,
        "title": title,
        "description": f"Description for {title}",
        "status": status,
        "reward": reward,
        "rewardFormatted": f"{int(reward) // 1_000_000} USDC",
        "tags": ["python"],
    }
    data.update(extra)
    return data


def verdict(suitable: bool = True, confidence: float = 0.8, effort: str = "low") -> str:
    payload = {
        "suitable": suitable,
        "confidence": confidence,
        "reasoning": "scripted",
        "estimatedEffort": effort,
    }
    return f"Here is my evaluation:\n```json\n{json.dumps(payload)}\n```"


class FakeBoard:
    """Bounty Board served through httpx.MockTransport."""

    def __init__(self, bounties=None, stats=None):
        self.bounties = list(bounties or [])
        self.stats = stats or {
            "totalBounties": 3,
            "openBounties": 2,
            "completedBounties": 1,
            "totalRewardsUSDC": "150",
        }
        self.requests: list[httpx.Request] = []
        self.fail_claim: set[str] = set()
        self.fail_submit: set[str] = set()
        self.outage = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if self.outage:
            return httpx.Response(503, text="maintenance")
        if request.method == "GET" and path == "/bounties":
            return httpx.Response(200, json=self.bounties)
        if request.method == "GET" and path == "/stats":
            return httpx.Response(200, json=self.stats)

        match = _MUTATION.fullmatch(path)
        if request.method == "POST" and match:
            bounty_id, action = match.groups()
            if action == "claim" and bounty_id in self.fail_claim:
                return httpx.Response(409, text="already claimed")
            if action == "submit" and bounty_id in self.fail_submit:
                return httpx.Response(500, text="submit exploded")
            return httpx.Response(200, json={"status": "claimed" if action == "claim" else "submitted"})

        return httpx.Response(404, text="not found")

    def client(self) -> BountyClient:
        return BountyClient(BOARD_URL, transport=httpx.MockTransport(self.handler))

    def posts(self) -> list[tuple[str, dict]]:
        return [
            (r.url.path, json.loads(r.content))
            for r in self.requests
            if r.method == "POST"
        ]

    def list_calls(self) -> int:
        return sum(1 for r in self.requests if r.method == "GET" and r.url.path == "/bounties")


class FakeLLM:
    """Chat model with scripted replies keyed on bounty title."""

    def __init__(self, replies=None, default=None, work_plan="I built and tested the fix."):
        self.replies = dict(replies or {})
        self.default = default if default is not None else verdict()
        self.work_plan = work_plan
        self.calls: list[list[dict]] = []

    def evaluation_calls(self) -> list[list[dict]]:
        return [m for m in self.calls if "evaluates bounty suitability" in m[0]["content"]]

    def chat(self, messages: list[dict]) -> str:
        self.calls.append(messages)
        system, user = messages[0]["content"], messages[1]["content"]

        if "evaluates bounty suitability" in system:
            reply = self.default
            for title, scripted in self.replies.items():
                if f"- Title: {title}\n" in user:
                    reply = scripted
                    break
        else:
            reply = self.work_plan

        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture()
def board():
    return FakeBoard([bounty_dict()])


@pytest.fixture()
def llm():
    return FakeLLM()


@pytest.fixture()
def make_agent():
    """Build an agent wired to a FakeBoard and FakeLLM."""

    def _make(board: FakeBoard, llm: FakeLLM, sleep=None, **overrides) -> BountyAgent:
        config = AgentConfig(
            openrouter_api_key="sk-or-test",
            wallet_address=WALLET,
            skills=["python", "api integration"],
            **overrides,
        )
        return BountyAgent(config, client=board.client(), llm=llm, sleep=sleep or (lambda s: None))

    return _make
