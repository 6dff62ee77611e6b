"""
Projectile and environment models for the launch simulation.
"""
from pydantic import Field

from domain.geometry.tuples import Tuple
from utils.base_model import ImmutableModel


class Projectile(ImmutableModel):
    """A projectile in flight."""
    position: Tuple = Field(description="Current position (a point)")
    velocity: Tuple = Field(description="Distance travelled per tick (a vector)")


class Environment(ImmutableModel):
    """Forces applied to a projectile on every tick."""
    gravity: Tuple = Field(description="Gravity (a vector)")
    wind: Tuple = Field(description="Wind (a vector)")


def tick(env: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + env.gravity + env.wind
    return Projectile(position=position, velocity=velocity)
