"""CLI for replaying liftdispatch scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from dispatch import Dispatcher, FleetConfig, TripRejected, event_to_dict, report_to_dict
from dispatch.reporting import format_event, format_request, format_status


def build_dispatcher(config: Dict) -> Dispatcher:
    fleet = FleetConfig(**config.get("fleet", {}))
    return Dispatcher(fleet)


def submit_request(
    dispatcher: Dispatcher, pickup_floor: int, dropoff_floor: int, emit: Callable[[str], None]
) -> Dict:
    outcome = dispatcher.request_trip(pickup_floor, dropoff_floor)
    if not isinstance(outcome, TripRejected):
        emit(format_request(pickup_floor, dropoff_floor))
    emit(format_event(outcome))
    return event_to_dict(outcome)


def _requests_due(requests: Iterable[Dict], after_step: Optional[int]) -> List[Dict]:
    return [r for r in requests if r.get("after_step") == after_step]


def run_scenario(
    dispatcher: Dispatcher,
    config: Dict,
    emit: Callable[[str], None] = print,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Dict]:
    """Drive the dispatcher through a scenario, returning a log of outcomes and reports."""

    duration = config.get("duration", 30)
    tick_seconds = config.get("tick_seconds", 0.0)
    status_interval = max(1, config.get("status_interval", 5))
    requests = config.get("requests", [])
    history: List[Dict] = []

    for request in _requests_due(requests, None):
        history.append(submit_request(dispatcher, request["pickup_floor"], request["dropoff_floor"], emit))

    for i in range(duration):
        if tick_seconds > 0:
            sleep(tick_seconds)
        report = dispatcher.step()
        for event in report.events:
            emit(format_event(event))
        history.append(report_to_dict(report))

        for request in _requests_due(requests, i):
            history.append(
                submit_request(dispatcher, request["pickup_floor"], request["dropoff_floor"], emit)
            )

        if i % status_interval == 0:
            emit(format_status(dispatcher))

    emit(format_status(dispatcher))
    return history


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the event history as JSON",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Ignore tick_seconds and run the steps back to back",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level for the dispatcher")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = json.loads(args.config.read_text())
    if args.no_delay:
        config["tick_seconds"] = 0
    dispatcher = build_dispatcher(config)

    print(f"=== {config.get('name', args.config.stem).upper()} STARTED ===")
    if config.get("description"):
        print(config["description"])
    print()
    history = run_scenario(dispatcher, config)
    print("=== SIMULATION ENDED ===")

    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "duration": config.get("duration", 30),
        "final_state": dispatcher.snapshot(),
        "history": history,
    }
    save_results(args.output, results)
    if args.output:
        print(f"Saved history to {args.output}")


if __name__ == "__main__":
    main()
