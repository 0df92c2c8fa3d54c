"""
Bounty Board API client.

Pure request/response: no retries, no caching. Any non-2xx reply raises
httpx.HTTPStatusError with the status and body in its message.
"""

from __future__ import annotations

from typing import Optional

import httpx

from bounty_agent.base_agent import DEFAULT_API_BASE, raise_for_api_status
from bounty_agent.models import Bounty, BountyStats


class BountyClient:
    """API client for the Bounty Board."""

    def __init__(self, api_base: str = DEFAULT_API_BASE, transport: Optional[httpx.BaseTransport] = None):
        self.api_base = (api_base or DEFAULT_API_BASE).rstrip("/")
        self.http = httpx.Client(base_url=self.api_base, timeout=60.0, transport=transport)

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _request(self, method: str, path: str, json_data: dict | None = None):
        resp = self.http.request(method, path, headers=self._headers(), json=json_data)
        raise_for_api_status(resp, "Bounty API")
        return resp.json()

    def get(self, path: str):
        return self._request("GET", path)

    def post(self, path: str, json_data: dict | None = None):
        return self._request("POST", path, json_data)

    def list_bounties(self) -> list[Bounty]:
        """Fetch all bounties that have a title."""
        data = self.get("/bounties") or []
        bounties = [Bounty.from_dict(b) for b in data if isinstance(b, dict)]
        return [b for b in bounties if b.title]

    def list_open_bounties(self) -> list[Bounty]:
        """Fetch only open bounties."""
        return [b for b in self.list_bounties() if b.status == "open"]

    def get_stats(self) -> BountyStats:
        """Fetch bounty board stats."""
        return BountyStats.from_dict(self.get("/stats") or {})

    def get_bounty(self, bounty_id: str) -> Bounty | None:
        """Get a specific bounty by ID."""
        for bounty in self.list_bounties():
            if bounty.id == str(bounty_id):
                return bounty
        return None

    def search_bounties(self, query: str) -> list[Bounty]:
        """Search bounties by keyword in title or description."""
        q = query.lower()
        return [
            b for b in self.list_bounties()
            if q in b.title.lower() or q in b.description.lower()
        ]

    def filter_by_tag(self, tag: str) -> list[Bounty]:
        t = tag.lower()
        return [b for b in self.list_bounties() if any(bt.lower() == t for bt in b.tags)]

    def claim_bounty(self, bounty_id: str, wallet_address: str) -> dict:
        """Claim a bounty for the given wallet."""
        return self.post(f"/bounties/{bounty_id}/claim", {"address": wallet_address})

    def submit_bounty(self, bounty_id: str, wallet_address: str, submission: str, proof: str) -> dict:
        """Submit work for a claimed bounty."""
        return self.post(f"/bounties/{bounty_id}/submit", {
            "address": wallet_address,
            "submission": submission,
            "proof": proof,
        })

    def close(self):
        self.http.close()
