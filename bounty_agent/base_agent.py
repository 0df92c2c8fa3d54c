"""
Bounty Hunter Agent — Shared Base Module

Shared utilities used by every part of the agent:
  - Configuration defaults
  - Logging
  - HTTP error helper
"""

from __future__ import annotations

from datetime import datetime

import httpx

# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════

DEFAULT_API_BASE = "https://bounty.owockibot.xyz"
OPENROUTER_API = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "anthropic/claude-sonnet-4"

DEFAULT_MAX_REWARD = 100.0          # display units (USDC)
DEFAULT_POLL_INTERVAL_MS = 300_000  # 5 minutes
DEFAULT_REWARD_SCALE = 1_000_000    # minor units per display unit
CONFIDENCE_THRESHOLD = 0.6
MAX_EVALUATIONS_PER_CYCLE = 5

DEFAULT_SKILLS = ["typescript", "javascript", "web development", "api integration"]
FALLBACK_SKILL = "general software development"

LLM_TEMPERATURE = 0.3
LLM_MAX_TOKENS = 2000


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════════════════════

def log(icon: str, msg: str, agent_name: str = "", **kwargs):
    ts = datetime.now().strftime("%H:%M:%S")
    prefix = f"[{agent_name}] " if agent_name else ""
    extra = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    print(f"  [{ts}] {icon} {prefix}{msg} {extra}".rstrip(), flush=True)


def log_think(msg: str, agent_name: str = "", **kw):
    log("THINK", msg, agent_name, **kw)


def log_act(msg: str, agent_name: str = "", **kw):
    log("ACT  ", msg, agent_name, **kw)


def log_ok(msg: str, agent_name: str = ""):
    prefix = f"[{agent_name}] " if agent_name else ""
    print(f"\033[32m[OK]     {prefix}{msg}\033[0m", flush=True)


def log_warn(msg: str, agent_name: str = "", **kw):
    log("WARN ", msg, agent_name, **kw)


def log_err(msg: str, agent_name: str = "", **kw):
    log("ERROR", msg, agent_name, **kw)


def log_wait(msg: str, agent_name: str = "", **kw):
    log(" ... ", msg, agent_name, **kw)


def mask_wallet(address: str) -> str:
    """Shorten a wallet address for display: 0x1234...abcd"""
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


# ═══════════════════════════════════════════════════════════════════════════
# HTTP
# ═══════════════════════════════════════════════════════════════════════════

def raise_for_api_status(resp: httpx.Response, service: str) -> None:
    """Raise HTTPStatusError carrying the status and body for any non-2xx reply."""
    if resp.is_success:
        return
    raise httpx.HTTPStatusError(
        f"{service} {resp.status_code}: {resp.text}",
        request=resp.request,
        response=resp,
    )
