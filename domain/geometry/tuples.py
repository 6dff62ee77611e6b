# domain/geometry/tuples.py
from typing import Any, Union
from pydantic import Field, field_validator
from domain.geometry.scalar import Float, Number
from utils.base_model import ImmutableModel


class Tuple(ImmutableModel):
    """
    A homogeneous coordinate (x, y, z, w) in 3D space.

    The w component tells points (w = 1) from vectors (w = 0). Arithmetic is
    componentwise over all four components, so intermediate results such as
    the sum of two points keep whatever w falls out of the algebra.
    """
    x: Float = Field(default=Float(0.0), description="X component")
    y: Float = Field(default=Float(0.0), description="Y component")
    z: Float = Field(default=Float(0.0), description="Z component")
    w: Float = Field(default=Float(0.0), description="W component (1 for points, 0 for vectors)")

    __hash__ = None

    def __init__(self, x: Any = 0.0, y: Any = 0.0, z: Any = 0.0, w: Any = 0.0, **data: Any) -> None:
        super().__init__(x=x, y=y, z=z, w=w, **data)

    @field_validator("x", "y", "z", "w", mode="before")
    @classmethod
    def wrap_numbers(cls, value: Any) -> Any:
        """Accept plain numbers for components."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Float(value)
        return value

    def is_point(self) -> bool:
        """Check if w marks this tuple as a point."""
        return self.w == Float(1.0)

    def is_vector(self) -> bool:
        """Check if w marks this tuple as a vector."""
        return self.w == Float(0.0)

    def __add__(self, other: "Tuple") -> "Tuple":
        """Componentwise addition."""
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        """Componentwise subtraction."""
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: Union[Float, Number]) -> "Tuple":
        """Scale every component, w included."""
        if not isinstance(scalar, (Float, int, float)) or isinstance(scalar, bool):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: Union[Float, Number]) -> "Tuple":
        """Scale with the scalar on the left."""
        return self.__mul__(scalar)

    def __neg__(self) -> "Tuple":
        """Componentwise negation."""
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def magnitude(self) -> Float:
        """Euclidean length over all four components."""
        return (self.x.square() + self.y.square() + self.z.square() + self.w.square()).sqrt()

    def normalize(self) -> "Tuple":
        """
        Scale the tuple to unit magnitude.

        A zero tuple has no direction; dividing by its zero magnitude gives
        NaN components instead of an error.
        """
        magnitude = self.magnitude()
        return Tuple(self.x / magnitude, self.y / magnitude, self.z / magnitude, self.w / magnitude)

    def dot(self, other: "Tuple") -> Float:
        """Sum of the componentwise products."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: "Tuple") -> "Tuple":
        """
        Cross product of the (x, y, z) parts.

        The result is always a vector; the w of either operand is ignored.
        """
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            Float(0.0),
        )

    def __eq__(self, other: object) -> bool:
        """Tolerant componentwise equality."""
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z and self.w == other.w

    def __ne__(self, other: object) -> bool:
        """Tolerant componentwise inequality."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def format_as_tuple(self) -> str:
        """Format the components as a tuple string."""
        return f"({self.x}, {self.y}, {self.z}, {self.w})"

    def __str__(self) -> str:
        """String representation of the tuple."""
        return self.format_as_tuple()


def make_tuple(x: Number, y: Number, z: Number, w: Number) -> Tuple:
    """Build a tuple from plain numbers."""
    return Tuple(Float(x), Float(y), Float(z), Float(w))


def point(x: Number, y: Number, z: Number) -> Tuple:
    """Build a point (w = 1)."""
    return make_tuple(x, y, z, 1.0)


def vector(x: Number, y: Number, z: Number) -> Tuple:
    """Build a vector (w = 0)."""
    return make_tuple(x, y, z, 0.0)
