"""
Tick loop for the projectile simulation.
"""
import logging
from typing import Callable, Optional

from pydantic import Field

from domain.geometry.scalar import Float
from models.parameters import SimulationParameters
from models.projectile import Projectile, tick
from utils.base_model import ImmutableModel

# Configure logging
logger = logging.getLogger(__name__)

TickCallback = Callable[[Projectile, int], None]


class SimulationResult(ImmutableModel):
    """Outcome of a simulation run."""
    ticks: int = Field(description="Number of ticks simulated")
    final: Projectile = Field(description="Projectile state after the last tick")
    landed: bool = Field(description="Whether the projectile reached the ground")


def run_simulation(parameters: Optional[SimulationParameters] = None,
                   on_tick: Optional[TickCallback] = None) -> SimulationResult:
    """
    Fly a projectile until it reaches the ground.

    The loop runs while the height is above zero (using tolerant comparison)
    and stops early at parameters.max_ticks.

    Args:
        parameters: Launch and environment settings, defaults if None
        on_tick: Called with the projectile and tick count after every tick

    Returns:
        The number of ticks, the final projectile state and whether it landed
    """
    if parameters is None:
        parameters = SimulationParameters()

    env = parameters.environment()
    projectile = parameters.initial_projectile()
    ground = Float(0.0)
    ticks = 0

    logger.info(f"Launching projectile from {projectile.position} with velocity {projectile.velocity}")

    while projectile.position.y > ground:
        if ticks >= parameters.max_ticks:
            logger.warning(f"Projectile still airborne after {ticks} ticks, stopping")
            return SimulationResult(ticks=ticks, final=projectile, landed=False)

        projectile = tick(env, projectile)
        ticks += 1
        logger.debug(f"Tick {ticks}: position {projectile.position}")

        if on_tick is not None:
            on_tick(projectile, ticks)

    landed = projectile.position.y <= ground
    if landed:
        logger.info(f"Projectile landed after {ticks} ticks at {projectile.position}")
    else:
        logger.warning(f"Projectile height became undefined after {ticks} ticks at {projectile.position}")
    return SimulationResult(ticks=ticks, final=projectile, landed=landed)
