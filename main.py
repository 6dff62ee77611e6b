#!/usr/bin/env python3
"""
The Ray Tracer Challenge - Chapter 1

Fires a projectile through a simple environment and reports its position on
every tick until it hits the ground.
"""
__version__ = "0.1.0"

import logging

from models.projectile import Projectile
from models.simulation import run_simulation
from utils.constants import LOG_FORMAT, LOG_DATE_FORMAT

logger = logging.getLogger(__name__)


def report_tick(projectile: Projectile, ticks: int) -> None:
    """Print the projectile position for one tick."""
    print(f"Position: {projectile.position} Ticks: {ticks}")


def main() -> None:
    """Main function to run the projectile simulation."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    print("The Ray Tracer Challenge")
    result = run_simulation(on_tick=report_tick)
    if not result.landed:
        logger.warning("Simulation stopped before the projectile landed")


if __name__ == "__main__":
    main()
