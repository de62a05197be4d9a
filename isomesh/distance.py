"""Distances in the metric spaces used for sampling isosurfaces."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec3

# Scales a cube's half-extent to its half-diagonal.
SQRT_OF_3 = 1.73205080757


@dataclass(frozen=True, slots=True)
class Signed:
    """A signed scalar distance."""

    value: float

    @classmethod
    def zero(cls) -> Signed:
        return cls(0.0)

    def is_positive(self) -> bool:
        """True when the point lies outside the surface."""
        return self.value > 0.0

    def lerp(self, other: Signed, factor: float) -> Signed:
        return Signed((1.0 - factor) * self.value + factor * other.value)

    def within_extent(self, extent: float) -> bool:
        """True if the distance falls within a cube of half-size ``extent``."""
        return abs(self.value) < extent * SQRT_OF_3

    @staticmethod
    def find_crossing_point(a: Signed, b: Signed, p_a: Vec3, p_b: Vec3) -> Vec3:
        """Point between ``p_a`` and ``p_b`` where the distance crosses zero."""
        delta = b.value - a.value
        t = 0.5 if delta == 0.0 else -a.value / delta
        return p_a * (1.0 - t) + p_b * t


@dataclass(frozen=True, slots=True)
class Directed:
    """A signed distance along each of the three cardinal axes."""

    vector: Vec3

    @classmethod
    def zero(cls) -> Directed:
        return cls(Vec3.zero())

    def is_positive(self) -> bool:
        """True when any component is positive, i.e. not inside the surface."""
        v = self.vector
        return v.x > 0.0 or v.y > 0.0 or v.z > 0.0

    def lerp(self, other: Directed, factor: float) -> Directed:
        return Directed(self.vector.lerp(other.vector, factor))

    def within_extent(self, extent: float) -> bool:
        """True if any axis distance falls within a cube of half-size ``extent``."""
        limit = extent * SQRT_OF_3
        return self.vector.abs().any(lambda f: f < limit)

    @staticmethod
    def find_crossing_point(a: Directed, b: Directed, p_a: Vec3, p_b: Vec3) -> Vec3:
        """Zero crossing along the dominant axis of the segment ``p_a``-``p_b``."""
        axis = (p_a - p_b).abs().max_component_index()
        delta = b.vector[axis] - a.vector[axis]
        t = 0.5 if delta == 0.0 else -a.vector[axis] / delta
        return p_a * (1.0 - t) + p_b * t