#!/usr/bin/env python3
"""Run the hourly allocation policy on a scenario file and summarise the outcome.

Usage:
    python scripts/run_scenario.py [scenario.json]
"""

import logging
import sys
from pathlib import Path

from acequia import AcequiaNetwork, AllocationPolicy

DEFAULT_SCENARIO = Path(__file__).parent.parent / "scenarios" / "dry_south.json"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger(__name__)


def run_scenario(path: Path) -> None:
    network = AcequiaNetwork.from_json(path)
    result = AllocationPolicy().run(network)

    log.info("Scenario: %s", path.name)
    log.info("Stopped: %s after %d hours, %d penalties", result.stop_reason.value, result.hours_run, network.penalties)
    for region in network.regions:
        log.info(
            "  %-6s level=%.2f need=%.2f capacity=%.2f",
            region.name,
            region.water_level,
            region.water_need,
            region.water_capacity,
        )

    frame = result.to_frame()
    if not frame.empty:
        summary = frame[frame["applied"]].groupby("role")["expected_volume"].sum()
        log.info("Volume scheduled per canal role:\n%s", summary.to_string())


if __name__ == "__main__":
    scenario = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SCENARIO
    run_scenario(scenario)
