"""CLI entry point for one-off trip computations.

Usage:
    python -m traveler.cli "Paris" "Lyon" --mode flying --algorithm dijkstra
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

import httpx
from dotenv import load_dotenv

from traveler.contracts.enums import Algorithm, TransportMode

logger = logging.getLogger(__name__)


async def _plan(args: argparse.Namespace) -> int:
    from traveler.api.app import build_session_registry

    async with httpx.AsyncClient(timeout=args.timeout) as http_client:
        registry = build_session_registry(http_client)
        session = registry.create()
        outcome = await session.compute(
            args.source,
            args.destination,
            mode=TransportMode(args.mode),
            avoid_tolls=args.avoid_tolls,
            avoid_highways=args.avoid_highways,
            algorithm=Algorithm(args.algorithm),
        )
        await registry.close()

    if not outcome.success:
        logger.error("%s: %s", outcome.error.code, outcome.error.message)
        return 1

    view = outcome.data
    if args.json:
        print(json.dumps(view.to_json_dict(), indent=2))
    else:
        print(f"{args.source} -> {args.destination} ({view.result.mode})")
        for leg in view.result.legs:
            print(f"  {leg.kind:<6} {leg.distance_meters:>12.0f} m {leg.duration_seconds:>10.0f} s")
        print(f"Distance: {view.distance_text}")
        print(f"Duration: {view.duration_text}")
        print(f"Algorithm: {view.algorithm_name} ({view.color})")
    return 0


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Traveler Guide trip planner")
    parser.add_argument("source", help="Source place, free text")
    parser.add_argument("destination", help="Destination place, free text")
    parser.add_argument(
        "--mode", choices=[m.value for m in TransportMode], default=TransportMode.DRIVING.value
    )
    parser.add_argument(
        "--algorithm", choices=[a.value for a in Algorithm], default=Algorithm.ASTAR.value
    )
    parser.add_argument("--avoid-tolls", action="store_true")
    parser.add_argument("--avoid-highways", action="store_true")
    parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout in seconds")
    parser.add_argument("--json", action="store_true", help="Print the full trip as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(asyncio.run(_plan(args)))


if __name__ == "__main__":
    main()
