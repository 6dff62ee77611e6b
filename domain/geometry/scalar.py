# domain/geometry/scalar.py
import math
from enum import Enum, auto
from typing import Any, Optional, Union
from pydantic import Field, field_validator
from domain.geometry.constants import EPSILON
from utils.base_model import ImmutableModel

Number = Union[int, float]


class Ordering(Enum):
    """Result of comparing two scalars."""
    LESS = auto()
    EQUAL = auto()
    GREATER = auto()


def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: dividing by zero yields an infinity or NaN."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _as_float(other: Any) -> Optional[float]:
    """Raw value of a Float or plain number; None for anything else."""
    if isinstance(other, Float):
        return other.value
    if isinstance(other, (int, float)) and not isinstance(other, bool):
        return float(other)
    return None


class Float(ImmutableModel):
    """
    A double-precision scalar with tolerant equality.

    Two scalars are equal when they differ by less than EPSILON, which absorbs
    the rounding error accumulated by chained arithmetic. Ordering only falls
    back to the numeric order when the values are not equal in that sense.

    Arithmetic never raises: division by zero and the square root of a
    negative number produce infinities and NaNs like plain IEEE doubles.
    """
    value: float = Field(default=0.0, description="Wrapped floating-point value")

    # Tolerant equality is not transitive, so there is no consistent hash.
    __hash__ = None

    def __init__(self, value: float = 0.0, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        """Booleans are not numbers here, matching the arithmetic operators."""
        if isinstance(value, bool):
            raise ValueError(f"Expected a number, got {value!r}")
        return value

    def __add__(self, other: Union["Float", Number]) -> "Float":
        """Sum of two scalars."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(self.value + value)

    def __radd__(self, other: Number) -> "Float":
        """Sum with a plain number on the left."""
        return self.__add__(other)

    def __sub__(self, other: Union["Float", Number]) -> "Float":
        """Difference of two scalars."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(self.value - value)

    def __rsub__(self, other: Number) -> "Float":
        """Difference with a plain number on the left."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(value - self.value)

    def __mul__(self, other: Union["Float", Number]) -> "Float":
        """Product of two scalars."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(self.value * value)

    def __rmul__(self, other: Number) -> "Float":
        """Product with a plain number on the left."""
        return self.__mul__(other)

    def __truediv__(self, other: Union["Float", Number]) -> "Float":
        """Quotient of two scalars, IEEE-754 on division by zero."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(_divide(self.value, value))

    def __rtruediv__(self, other: Number) -> "Float":
        """Quotient with a plain number on the left."""
        value = _as_float(other)
        if value is None:
            return NotImplemented
        return Float(_divide(value, self.value))

    def __neg__(self) -> "Float":
        """Sign-flipped scalar."""
        return Float(-self.value)

    def __abs__(self) -> "Float":
        """Absolute value."""
        return self.abs()

    def abs(self) -> "Float":
        """Absolute value."""
        return Float(abs(self.value))

    def square(self) -> "Float":
        """The value multiplied by itself."""
        return Float(self.value * self.value)

    def sqrt(self) -> "Float":
        """Non-negative square root; NaN for negative values."""
        if self.value < 0.0:
            return Float(math.nan)
        return Float(math.sqrt(self.value))

    def equals(self, other: Union["Float", Number]) -> bool:
        """Check whether the values differ by less than EPSILON."""
        value = _as_float(other)
        if value is None:
            return False
        return abs(self.value - value) < EPSILON

    def compare(self, other: Union["Float", Number]) -> Optional[Ordering]:
        """
        Compare with another scalar.

        Returns:
            Ordering.EQUAL if the values are equal within EPSILON, otherwise
            the numeric ordering. None if either value is NaN. Equal infinities
            compare as EQUAL.
        """
        value = _as_float(other)
        if value is None:
            raise TypeError(f"Cannot compare Float with {type(other).__name__}")
        if self.equals(value) or self.value == value:
            return Ordering.EQUAL
        if self.value < value:
            return Ordering.LESS
        if self.value > value:
            return Ordering.GREATER
        return None

    def __eq__(self, other: object) -> bool:
        """Tolerant equality."""
        if _as_float(other) is None:
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Tolerant inequality."""
        if _as_float(other) is None:
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: Union["Float", Number]) -> bool:
        """Strictly less, ignoring differences below EPSILON."""
        if _as_float(other) is None:
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: Union["Float", Number]) -> bool:
        """Less than or equal within EPSILON."""
        if _as_float(other) is None:
            return NotImplemented
        return self.compare(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Union["Float", Number]) -> bool:
        """Strictly greater, ignoring differences below EPSILON."""
        if _as_float(other) is None:
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: Union["Float", Number]) -> bool:
        """Greater than or equal within EPSILON."""
        if _as_float(other) is None:
            return NotImplemented
        return self.compare(other) in (Ordering.GREATER, Ordering.EQUAL)

    def __float__(self) -> float:
        """The wrapped value."""
        return self.value

    def __str__(self) -> str:
        """String representation of the value."""
        return str(self.value)

    def __repr__(self) -> str:
        return f"Float({self.value!r})"
