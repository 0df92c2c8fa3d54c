"""Tests for the Bounty Board API client."""

from __future__ import annotations

import json

import httpx
import pytest

from bounty_agent.client import BountyClient
from conftest import BOARD_URL, FakeBoard, bounty_dict


@pytest.fixture()
def full_board():
    return FakeBoard([
        bounty_dict(id="1", title="Fix login bug", tags=["Python", "auth"]),
        bounty_dict(id="2", title="Design logo", status="completed", tags=["design"]),
        bounty_dict(id="3", title="", tags=["python"]),
        bounty_dict(id="4", title="API docs", description="Document the REST api", tags=["docs"]),
    ])


def test_list_bounties_drops_untitled(full_board):
    assert [b.id for b in full_board.client().list_bounties()] == ["1", "2", "4"]


def test_list_open_bounties(full_board):
    assert [b.id for b in full_board.client().list_open_bounties()] == ["1", "4"]


def test_get_bounty(full_board):
    client = full_board.client()
    assert client.get_bounty("2").title == "Design logo"
    assert client.get_bounty("99") is None


def test_search_bounties_matches_title_or_description(full_board):
    client = full_board.client()
    assert [b.id for b in client.search_bounties("LOGIN")] == ["1"]
    assert [b.id for b in client.search_bounties("rest API")] == ["4"]


def test_search_bounties_with_numeric_title():
    board = FakeBoard([bounty_dict(id="1", title=404), bounty_dict(id="2", title="Other")])
    assert [b.id for b in board.client().search_bounties("404")] == ["1"]


def test_close_releases_connection(full_board):
    client = full_board.client()
    client.close()
    assert client.http.is_closed


def test_filter_by_tag_is_case_insensitive(full_board):
    assert [b.id for b in full_board.client().filter_by_tag("python")] == ["1"]


def test_get_stats(full_board):
    stats = full_board.client().get_stats()
    assert stats.total_bounties == 3
    assert stats.total_rewards_usdc == "150"


def test_claim_and_submit_payloads(full_board):
    client = full_board.client()

    assert client.claim_bounty("1", "0xwallet") == {"status": "claimed"}
    assert client.submit_bounty("1", "0xwallet", "did it", "https://proof") == {"status": "submitted"}

    claim, submit = full_board.requests
    assert claim.method == "POST"
    assert str(claim.url) == f"{BOARD_URL}/bounties/1/claim"
    assert claim.headers["content-type"] == "application/json"
    assert json.loads(claim.content) == {"address": "0xwallet"}
    assert json.loads(submit.content) == {
        "address": "0xwallet",
        "submission": "did it",
        "proof": "https://proof",
    }


def test_non_2xx_raises_with_status_and_body(full_board):
    full_board.fail_claim.add("1")

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        full_board.client().claim_bounty("1", "0xwallet")

    assert str(excinfo.value) == "Bounty API 409: already claimed"
    assert excinfo.value.response.status_code == 409
    # No retry
    assert len(full_board.requests) == 1


def test_api_base_trailing_slash():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=[])

    client = BountyClient(f"{BOARD_URL}/", transport=httpx.MockTransport(handler))
    assert client.list_open_bounties() == []
    assert seen == [f"{BOARD_URL}/bounties"]
