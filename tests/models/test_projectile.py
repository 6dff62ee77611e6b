import pytest
from domain.geometry.tuples import point, vector
from models.projectile import Environment, Projectile, tick


class TestProjectile:
    def test_create_projectile(self):
        p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(1.0, 1.0, 0.0))
        assert p.position.is_point()
        assert p.velocity.is_vector()

    def test_immutability(self):
        p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(1.0, 1.0, 0.0))

        with pytest.raises(Exception):
            p.position = point(1.0, 1.0, 1.0)


class TestTick:
    def test_tick_moves_and_accelerates(self):
        env = Environment(gravity=vector(0.0, -1.0, 0.0), wind=vector(-0.5, 0.0, 0.0))
        p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(2.0, 3.0, 0.0))

        result = tick(env, p)

        assert result.position == point(2.0, 4.0, 0.0)
        assert result.velocity == vector(1.5, 2.0, 0.0)

    def test_tick_keeps_point_and_vector(self):
        env = Environment(gravity=vector(0.0, -1.0, 0.0), wind=vector(0.0, 0.0, 0.0))
        p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(2.0, 3.0, 0.0))

        result = tick(env, p)

        assert result.position.is_point()
        assert result.velocity.is_vector()

    def test_tick_does_not_modify_input(self):
        env = Environment(gravity=vector(0.0, -1.0, 0.0), wind=vector(0.0, 0.0, 0.0))
        p = Projectile(position=point(0.0, 1.0, 0.0), velocity=vector(2.0, 3.0, 0.0))

        tick(env, p)

        assert p.position == point(0.0, 1.0, 0.0)
        assert p.velocity == vector(2.0, 3.0, 0.0)
