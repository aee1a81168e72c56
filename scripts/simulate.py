#!/usr/bin/env python3
import argparse
import json
import logging
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from azul_core import FirstLegalAgent, GreedyFillAgent, RandomAgent, load_ruleset, play_series  # noqa: E402

AGENTS = {
    "random": RandomAgent,
    "first": FirstLegalAgent,
    "greedy": GreedyFillAgent,
}


def _build_agents(raw: str, seed: int | None) -> list:
    names = [n.strip() for n in raw.split(",") if n.strip()]
    unknown = [n for n in names if n not in AGENTS]
    if unknown:
        raise SystemExit(f"unknown agents: {', '.join(unknown)}")
    agents = []
    for i, name in enumerate(names):
        if name == "random":
            agents.append(RandomAgent(rng=random.Random(None if seed is None else seed * 31 + i)))
        else:
            agents.append(AGENTS[name]())
    return agents


def main() -> None:
    parser = argparse.ArgumentParser(description="Play self-play matches and print a JSON summary.")
    parser.add_argument("--agents", default="random,random", help="Comma-separated agents (random, first, greedy).")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None, help="Seed for deterministic runs (omit for random).")
    parser.add_argument("--ruleset", default=None, help="Ruleset preset; defaults to $AZUL_RULESET or 'observed'.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    agents = _build_agents(args.agents, args.seed)
    results = play_series(agents, args.games, seed=args.seed, ruleset=load_ruleset(args.ruleset))
    summary = [
        {
            "rounds": r.final_state.round_number,
            "moves": len(r.moves),
            "end_reason": r.final_state.end_reason,
            "scores": r.scores,
        }
        for r in results
    ]
    json.dump(summary, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
