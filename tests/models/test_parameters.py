import pytest
import math
from pydantic import ValidationError
from domain.geometry.tuples import point, vector
from models.parameters import SimulationParameters
from utils.constants import DEFAULT_MAX_TICKS


class TestSimulationParameters:
    """Test cases for SimulationParameters."""

    def test_defaults(self):
        params = SimulationParameters()
        assert params.start_position == (0.0, 1.0, 0.0)
        assert params.launch_direction == (1.0, 1.0, 0.0)
        assert params.launch_speed == 100.0
        assert params.gravity == (0.0, -1.0, 0.0)
        assert params.wind == (-0.01, 0.0, 0.0)
        assert params.max_ticks == DEFAULT_MAX_TICKS

    def test_overrides(self):
        params = SimulationParameters(launch_speed=11.25, wind=(0.0, 0.0, 0.0))
        assert params.launch_speed == 11.25
        assert params.wind == (0.0, 0.0, 0.0)
        assert params.gravity == (0.0, -1.0, 0.0)

    def test_non_finite_components_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(gravity=(0.0, math.inf, 0.0))
        with pytest.raises(ValidationError):
            SimulationParameters(start_position=(math.nan, 1.0, 0.0))

    def test_non_finite_speed_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(launch_speed=math.inf)

    def test_max_ticks_must_be_positive(self):
        with pytest.raises(ValidationError):
            SimulationParameters(max_ticks=0)

    def test_zero_launch_direction_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SimulationParameters(launch_direction=(0.0, 0.0, 0.0))

        assert "cannot be normalized" in str(exc_info.value)

    def test_direction_with_underflowing_magnitude_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SimulationParameters(launch_direction=(1e-200, 0.0, 0.0))

        assert "cannot be normalized" in str(exc_info.value)

    def test_direction_with_overflowing_magnitude_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(launch_direction=(1e200, 1e200, 0.0))

    def test_small_but_normalizable_direction_accepted(self):
        params = SimulationParameters(launch_direction=(1e-100, 0.0, 0.0), launch_speed=2.0)
        assert params.initial_velocity() == vector(2.0, 0.0, 0.0)

    def test_wrong_number_of_components_rejected(self):
        with pytest.raises(ValidationError):
            SimulationParameters(wind=(0.0, 0.0))

    def test_initial_velocity(self):
        params = SimulationParameters(launch_direction=(3.0, 4.0, 0.0), launch_speed=10.0)
        assert params.initial_velocity() == vector(6.0, 8.0, 0.0)

    def test_initial_projectile(self):
        projectile = SimulationParameters().initial_projectile()
        assert projectile.position == point(0.0, 1.0, 0.0)
        assert projectile.velocity == vector(70.71068, 70.71068, 0.0)

    def test_environment(self):
        env = SimulationParameters().environment()
        assert env.gravity == vector(0.0, -1.0, 0.0)
        assert env.wind == vector(-0.01, 0.0, 0.0)

    def test_serialization(self):
        params = SimulationParameters(max_ticks=50)
        restored = SimulationParameters.model_validate(params.model_dump())
        assert restored.model_dump() == params.model_dump()
