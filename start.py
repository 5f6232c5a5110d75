"""Launcher for the Kiwiland railroad API.

Serves the HTTP API with uvicorn, or with ``--demo`` prints the answers
to the reference questions for the configured graph and exits.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from kiwiland.config import get_config
from kiwiland.container import get_container
from kiwiland.domain.errors import KiwilandError
from kiwiland.logging_config import configure_logging
from kiwiland.services import RailwayQueryService


def run_demo(service: RailwayQueryService) -> List[str]:
    """Answer the reference questions, one output line each."""
    answers = [
        service.format_distance(service.distance("A-B-C")),
        service.format_distance(service.distance("A-D")),
        service.format_distance(service.distance("A-D-C")),
        service.format_distance(service.distance("A-E-B-C-D")),
        service.format_distance(service.distance("A-E-D")),
        str(service.trips_by_stops("C", "C", max_stops=3).count),
        str(service.trips_by_stops("A", "C", exact_stops=4).count),
        service.format_distance(service.shortest("A", "C")),
        service.format_distance(service.shortest("B", "B")),
        str(service.routes_within("C", "C", 30).count),
    ]
    return [f"Output #{i}: {answer}" for i, answer in enumerate(answers, start=1)]


def main(argv: Optional[List[str]] = None) -> int:
    config = get_config()

    parser = argparse.ArgumentParser(description="Kiwiland railroad API")
    parser.add_argument("--host", default=config.api.host)
    parser.add_argument("--port", type=int, default=config.api.port)
    parser.add_argument(
        "--demo",
        action="store_true",
        help="print answers to the reference questions instead of serving",
    )
    args = parser.parse_args(argv)

    logger = configure_logging(config.observability)

    try:
        service = get_container().resolve(RailwayQueryService)
    except KiwilandError as e:
        logger.error("Cannot build the railway graph: %s", e)
        return 1

    if args.demo:
        for line in run_demo(service):
            print(line)
        return 0

    import uvicorn

    from kiwiland.api import create_app

    app = create_app(service=service, config=config)
    logger.info("Kiwiland API listening on http://%s:%s%s", args.host, args.port, config.api.prefix)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
