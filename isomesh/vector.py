"""Small immutable 2D and 3D vector types used throughout the package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

# The largest finite single-precision float, used as "no crossing" distance.
FLOAT_MAX = 3.4028234663852886e38

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True)
class Vec2:
    """A two-component vector."""

    x: float
    y: float

    @classmethod
    def from_scalar(cls, value: Scalar) -> Vec2:
        """Vector with both components set to ``value``."""
        return cls(float(value), float(value))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return self.length_squared() ** 0.5

    def extend(self, z: Scalar) -> Vec3:
        """Append a z component to form a 3D vector."""
        return Vec3(self.x, self.y, float(z))

    def any(self, predicate: Callable[[float], bool]) -> bool:
        """True if ``predicate`` holds for any component."""
        return any(predicate(c) for c in self)


@dataclass(frozen=True, slots=True)
class Vec3:
    """A three-component vector."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vec3:
        """The zero vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_scalar(cls, value: Scalar) -> Vec3:
        """Vector with all components set to ``value``."""
        v = float(value)
        return cls(v, v, v)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, axis: int) -> float:
        return (self.x, self.y, self.z)[axis]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[Vec3, Scalar]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Vec3, Scalar]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec3(self.x / other, self.y / other, self.z / other)

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return self.length_squared() ** 0.5

    def normalised(self) -> Optional[Vec3]:
        """Unit vector in the same direction, or None for a zero vector."""
        length = self.length()
        if length == 0.0:
            return None
        return self / length

    def abs(self) -> Vec3:
        """Componentwise absolute value."""
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def min(self, other: Vec3) -> Vec3:
        """Componentwise minimum."""
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Vec3) -> Vec3:
        """Componentwise maximum."""
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def max_component(self) -> float:
        """The largest component."""
        return max(self)

    def max_component_index(self) -> int:
        """Index of the largest component (the first one on ties)."""
        return max(range(3), key=self.__getitem__)

    def lerp(self, other: Vec3, factor: float) -> Vec3:
        """Linear interpolation towards ``other``."""
        return self * (1.0 - factor) + other * factor

    def any(self, predicate: Callable[[float], bool]) -> bool:
        """True if ``predicate`` holds for any component."""
        return any(predicate(c) for c in self)

    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def yz(self) -> Vec2:
        return Vec2(self.y, self.z)

    def xz(self) -> Vec2:
        return Vec2(self.x, self.z)

    def clamp_to_cardinal_axis(self) -> Vec3:
        """Keep only the component of greatest magnitude, zeroing the rest."""
        axis = self.abs().max_component_index()
        components = [0.0, 0.0, 0.0]
        components[axis] = self[axis]
        return Vec3(*components)