"""
Launch and environment parameters for the projectile simulation.
"""
import math
from typing import Tuple as Triple

from pydantic import Field, field_validator, model_validator

from domain.geometry.tuples import Tuple, point, vector
from models.projectile import Environment, Projectile
from utils.base_model import ImmutableModel
from utils.constants import (
    DEFAULT_START_POSITION, DEFAULT_LAUNCH_DIRECTION, DEFAULT_LAUNCH_SPEED,
    DEFAULT_GRAVITY, DEFAULT_WIND, DEFAULT_MAX_TICKS
)

Coordinates = Triple[float, float, float]


class SimulationParameters(ImmutableModel):
    """Settings for one projectile run.

    Coordinates are plain (x, y, z) triples; they are turned into points and
    vectors only when the projectile and environment are built.
    """
    start_position: Coordinates = Field(
        default=DEFAULT_START_POSITION, description="Launch point")
    launch_direction: Coordinates = Field(
        default=DEFAULT_LAUNCH_DIRECTION, description="Launch direction, normalized before use")
    launch_speed: float = Field(
        default=DEFAULT_LAUNCH_SPEED, description="Length of the initial velocity")
    gravity: Coordinates = Field(
        default=DEFAULT_GRAVITY, description="Velocity change per tick from gravity")
    wind: Coordinates = Field(
        default=DEFAULT_WIND, description="Velocity change per tick from wind")
    max_ticks: int = Field(
        default=DEFAULT_MAX_TICKS, gt=0, description="Maximum number of ticks to simulate")

    @field_validator("start_position", "launch_direction", "gravity", "wind")
    @classmethod
    def validate_components(cls, value: Coordinates) -> Coordinates:
        """Validate that all components are finite numbers."""
        if not all(math.isfinite(component) for component in value):
            raise ValueError(f"Components must be finite numbers, got {value}")
        return value

    @field_validator("launch_speed")
    @classmethod
    def validate_speed(cls, value: float) -> float:
        """Validate that the speed is a finite number."""
        if not math.isfinite(value):
            raise ValueError(f"Launch speed must be a finite number, got {value}")
        return value

    @model_validator(mode="after")
    def validate_direction(self) -> "SimulationParameters":
        """Validate that the launch direction can be normalized."""
        magnitude = vector(*self.launch_direction).magnitude()
        if magnitude.value == 0.0 or not math.isfinite(magnitude.value):
            raise ValueError(f"Launch direction cannot be normalized, its magnitude is {magnitude}")
        return self

    def initial_velocity(self) -> Tuple:
        """Velocity at launch: the normalized direction scaled by the speed."""
        return vector(*self.launch_direction).normalize() * self.launch_speed

    def initial_projectile(self) -> Projectile:
        """Build the projectile at its launch state."""
        return Projectile(position=point(*self.start_position), velocity=self.initial_velocity())

    def environment(self) -> Environment:
        """Build the environment acting on the projectile."""
        return Environment(gravity=vector(*self.gravity), wind=vector(*self.wind))
