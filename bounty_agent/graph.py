"""
Bounty Hunt Cycle — LangGraph Graph Definition

Graph flow:
    discover → evaluate → select_bounty → claim → generate_work → submit
                               ↑                                   │
                               └───────────────────────────────────┘

Conditional routing:
    - After discover: if nothing new → END
    - After select_bounty: if the queue is exhausted → summarize → END
    - After claim: if the claim failed → select_bounty
    - After submit: always back to select_bounty
"""

from __future__ import annotations
from functools import partial
from typing import TYPE_CHECKING

from langgraph.graph import StateGraph, END

from bounty_agent.state import CycleState
from bounty_agent.nodes.discover import discover
from bounty_agent.nodes.evaluate import evaluate
from bounty_agent.nodes.select_bounty import select_bounty
from bounty_agent.nodes.claim import claim
from bounty_agent.nodes.generate_work import generate_work
from bounty_agent.nodes.submit import submit
from bounty_agent.nodes.summarize import summarize

if TYPE_CHECKING:
    from bounty_agent.agent import BountyAgent

NODES_PER_BOUNTY = 4  # select_bounty, claim, generate_work, submit


def should_evaluate(state: CycleState) -> str:
    """After discover: evaluate or end when there is nothing new."""
    if state.get("bounties"):
        return "evaluate"
    return "end"


def should_claim(state: CycleState) -> str:
    """After select_bounty: claim the selected bounty or wrap up."""
    if state.get("current") is not None:
        return "claim"
    return "done"


def should_work(state: CycleState) -> str:
    """After claim: generate work, or move on when the claim failed."""
    if state.get("claimed"):
        return "work"
    return "next"


def build_graph(agent: BountyAgent):
    """Build and compile the hunt-cycle graph bound to one agent."""
    workflow = StateGraph(CycleState)

    # Add nodes
    workflow.add_node("discover", partial(discover, agent=agent))
    workflow.add_node("evaluate", partial(evaluate, agent=agent))
    workflow.add_node("select_bounty", partial(select_bounty, agent=agent))
    workflow.add_node("claim", partial(claim, agent=agent))
    workflow.add_node("generate_work", partial(generate_work, agent=agent))
    workflow.add_node("submit", partial(submit, agent=agent))
    workflow.add_node("summarize", partial(summarize, agent=agent))

    # Entry point
    workflow.set_entry_point("discover")

    # Edges with conditional routing
    workflow.add_conditional_edges(
        "discover",
        should_evaluate,
        {"evaluate": "evaluate", "end": END},
    )

    workflow.add_edge("evaluate", "select_bounty")

    workflow.add_conditional_edges(
        "select_bounty",
        should_claim,
        {"claim": "claim", "done": "summarize"},
    )

    workflow.add_conditional_edges(
        "claim",
        should_work,
        {"work": "generate_work", "next": "select_bounty"},
    )

    workflow.add_edge("generate_work", "submit")
    workflow.add_edge("submit", "select_bounty")
    workflow.add_edge("summarize", END)

    return workflow.compile()


def recursion_limit(max_evaluations: int) -> int:
    """Upper bound on graph steps for one cycle."""
    return NODES_PER_BOUNTY * max_evaluations + 10
