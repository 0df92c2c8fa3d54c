"""
Bounty Hunter Agent — Entry Point

Usage:
    # Autonomous loop (default)
    bounty-agent loop

    # Run a single hunt cycle
    bounty-agent once --dry-run

    # List open bounties without evaluating them
    bounty-agent discover [--tag python | --search "api"]

    # Board statistics
    bounty-agent stats
"""

from __future__ import annotations

import argparse
import os
import signal
import sys

from dotenv import load_dotenv

from bounty_agent.base_agent import (
    DEFAULT_API_BASE,
    DEFAULT_MAX_REWARD,
    DEFAULT_MODEL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_REWARD_SCALE,
    DEFAULT_SKILLS,
    log_err,
    log_ok,
    log_think,
    log_warn,
)
from bounty_agent.agent import BountyAgent
from bounty_agent.client import BountyClient
from bounty_agent.models import AgentConfig

CLI = "CLI"

USAGE = """\
Required environment variables:
  OPENROUTER_API_KEY - Your OpenRouter API key
  WALLET_ADDRESS     - Your wallet address

Optional:
  MODEL              - OpenRouter model (default: anthropic/claude-sonnet-4)
  DRY_RUN            - Set to 'true' for simulation mode
  MAX_REWARD         - Max bounty reward in USDC (default: 100)
  POLL_INTERVAL      - Loop interval in seconds (default: 300)
  SKILLS             - Comma-separated skills list
  BOUNTY_API_BASE    - Bounty Board API base URL
  REWARD_SCALE       - Reward minor units per USDC (default: 1000000)"""


class ConfigError(Exception):
    """Mandatory configuration is missing."""


def _positive_number(raw: str | None, default: float) -> float:
    try:
        value = float(raw) if raw else 0
    except ValueError:
        return default
    return value if value > 0 else default


def parse_skills(raw: str | None) -> list[str]:
    if not raw:
        return list(DEFAULT_SKILLS)
    return [s.strip() for s in raw.split(",") if s.strip()]


def require_credentials(env=None) -> tuple[str, str]:
    """Return (api key, wallet) or raise ConfigError with the usage text."""
    env = os.environ if env is None else env
    api_key = env.get("OPENROUTER_API_KEY", "")
    wallet = env.get("WALLET_ADDRESS", "")
    if not api_key or not wallet:
        raise ConfigError(USAGE)
    return api_key, wallet


def config_from_env(env=None, dry_run: bool = False) -> AgentConfig:
    """Resolve AgentConfig from environment variables."""
    env = os.environ if env is None else env
    api_key, wallet = require_credentials(env)

    poll_seconds = _positive_number(env.get("POLL_INTERVAL"), DEFAULT_POLL_INTERVAL_MS / 1000)

    return AgentConfig(
        openrouter_api_key=api_key,
        wallet_address=wallet,
        model=env.get("MODEL") or DEFAULT_MODEL,
        skills=parse_skills(env.get("SKILLS")),
        max_reward=_positive_number(env.get("MAX_REWARD"), DEFAULT_MAX_REWARD),
        api_base=env.get("BOUNTY_API_BASE") or DEFAULT_API_BASE,
        dry_run=dry_run or env.get("DRY_RUN") == "true",
        poll_interval=int(poll_seconds * 1000),
        reward_scale=int(_positive_number(env.get("REWARD_SCALE"), DEFAULT_REWARD_SCALE)),
    )


# ═══════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════

def cmd_discover(args) -> int:
    """List open bounties without evaluating them."""
    log_think("Discovering bounties...", CLI)
    client = BountyClient(os.environ.get("BOUNTY_API_BASE") or DEFAULT_API_BASE)
    try:
        if args.tag:
            bounties = client.filter_by_tag(args.tag)
        elif args.search:
            bounties = client.search_bounties(args.search)
        else:
            bounties = client.list_bounties()
    finally:
        client.close()
    bounties = [b for b in bounties if b.status == "open"]

    print(f"\nFound {len(bounties)} open bounties:\n")
    for b in bounties:
        print(f"  #{b.id} [{b.reward_formatted}] {b.title}")
        print(f"    Tags: {', '.join(b.tags)}")
    return 0


def cmd_stats(args) -> int:
    """Print bounty board statistics."""
    client = BountyClient(os.environ.get("BOUNTY_API_BASE") or DEFAULT_API_BASE)
    try:
        stats = client.get_stats()
    finally:
        client.close()
    print(f"\n{'='*60}")
    print("  Bounty Board Stats")
    print(f"  Total bounties:     {stats.total_bounties}")
    print(f"  Open bounties:      {stats.open_bounties}")
    print(f"  Completed bounties: {stats.completed_bounties}")
    print(f"  Total rewards:      {stats.total_rewards_usdc} USDC")
    print(f"{'='*60}")
    return 0


def _build_agent(args) -> BountyAgent:
    return BountyAgent(config_from_env(dry_run=args.dry_run))


def cmd_once(args) -> int:
    """Run a single bounty hunt cycle."""
    agent = _build_agent(args)
    log_think("Running single bounty hunt cycle...", CLI)
    try:
        agent.run_cycle()
    finally:
        agent.close()
    return 0


def cmd_loop(args) -> int:
    """Start the autonomous loop until interrupted."""
    agent = _build_agent(args)

    def _on_sigterm(signum, frame):
        log_warn("Received SIGTERM, stopping...", CLI)
        agent.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, _on_sigterm)

    try:
        agent.start_loop()
    except KeyboardInterrupt:
        print()
        log_warn("Received SIGINT, stopping...", CLI)
        agent.stop()
    finally:
        agent.close()
    state = agent.get_state()
    log_ok(
        f"Agent stopped. Claimed {len(state['claimed'])}, "
        f"completed {len(state['completed'])}, skipped {len(state['skipped'])}.",
        CLI,
    )
    return 0


COMMANDS = {
    "discover": cmd_discover,
    "stats": cmd_stats,
    "once": cmd_once,
    "loop": cmd_loop,
}


# ═══════════════════════════════════════════════════════════════════════════
# MAIN
# ═══════════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bounty-agent",
        description="Autonomous Bounty Board agent powered by OpenRouter",
    )
    parser.add_argument(
        "mode", nargs="?", default="loop", choices=sorted(COMMANDS),
        help="discover, stats, once or loop (default: loop)",
    )
    parser.add_argument("--dry-run", action="store_true",
                        help="Simulate claim/submit without contacting the board")
    filters = parser.add_mutually_exclusive_group()
    filters.add_argument("--tag", type=str, default=None, help="discover: only bounties with this tag")
    filters.add_argument("--search", type=str, default=None, help="discover: keyword in title/description")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        require_credentials()
        return COMMANDS[args.mode](args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:
        log_err(f"Fatal error: {exc}", CLI)
        return 1


if __name__ == "__main__":
    sys.exit(main())
