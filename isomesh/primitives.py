"""Implicit primitive shapes sampled as scalar, directed and normal fields."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .distance import Directed, Signed
from .vector import FLOAT_MAX, Vec2, Vec3

__all__ = ["Cylinder", "RectangularPrism", "Sphere", "Torus"]


def _sqrt(value: float) -> float:
    """Square root that yields NaN for negative input instead of raising."""
    return math.sqrt(value) if value >= 0.0 else math.nan


def _fmax(a: float, b: float) -> float:
    """Maximum of two floats, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass(frozen=True)
class Sphere:
    """A sphere centred on the origin."""

    radius: float

    def sample_scalar(self, p: Vec3) -> Signed:
        return Signed(p.length() - self.radius)

    def sample_vector(self, p: Vec3) -> Directed:
        # Flip the point into the positive octant.
        a = p.abs()
        r2 = self.radius * self.radius
        l_yz = r2 - a.yz().length_squared()
        l_xz = r2 - a.xz().length_squared()
        l_xy = r2 - a.xy().length_squared()
        return Directed(
            Vec3(
                FLOAT_MAX if l_yz < 0.0 else a.x - math.sqrt(l_yz),
                FLOAT_MAX if l_xz < 0.0 else a.y - math.sqrt(l_xz),
                FLOAT_MAX if l_xy < 0.0 else a.z - math.sqrt(l_xy),
            )
        )

    def sample_normal(self, p: Vec3) -> Vec3:
        # The gradient of the distance to the centre points along p itself.
        return Vec3(p.x, p.y, p.z)


@dataclass(frozen=True)
class Torus:
    """A torus lying in the xy plane, centred on the origin."""

    radius: float
    tube_radius: float

    def sample_scalar(self, p: Vec3) -> Signed:
        q_x = abs(math.sqrt(p.x * p.x + p.y * p.y)) - self.radius
        distance = math.sqrt(q_x * q_x + p.z * p.z)
        return Signed(distance - self.tube_radius)

    def sample_vector(self, p: Vec3) -> Directed:
        a = p.abs()
        l_xy = Vec2(a.x, a.y).length() - self.radius
        tube_at_z = _sqrt(self.tube_radius * self.tube_radius - a.z * a.z)
        outer = self.radius + tube_at_z
        inner = self.radius - tube_at_z

        if a.z > self.tube_radius or a.y > outer:
            x = FLOAT_MAX
        elif a.x == 0.0:
            x = abs(a.y - self.radius) - self.tube_radius
        else:
            x = _fmax(
                a.x - _sqrt(outer * outer - a.y * a.y),
                _sqrt(inner * inner - a.y * a.y) - a.x,
            )

        if a.z > self.tube_radius or a.x > outer:
            y = FLOAT_MAX
        elif a.y == 0.0:
            y = abs(a.x - self.radius) - self.tube_radius
        else:
            y = _fmax(
                a.y - _sqrt(outer * outer - a.x * a.x),
                _sqrt(inner * inner - a.x * a.x) - a.y,
            )

        if abs(l_xy) > self.tube_radius:
            z = FLOAT_MAX
        else:
            z = a.z - _sqrt(self.tube_radius * self.tube_radius - l_xy * l_xy)

        return Directed(Vec3(x, y, z))

    def sample_normal(self, p: Vec3) -> Vec3:
        # Closest point on the major ring of the torus.
        direction = Vec3(p.x, p.y, 0.0).normalised() or Vec3(1.0, 0.0, 0.0)
        return p - direction * self.radius


@dataclass(frozen=True)
class Cylinder:
    """A capped cylinder along the z axis, centred on the origin."""

    radius: float
    half_length: float

    def sample_scalar(self, p: Vec3) -> Signed:
        q_x = abs(p.xy().length()) - self.radius
        q_z = abs(p.z) - self.half_length
        d = Vec3(max(q_x, 0.0), max(q_z, 0.0), 0.0)
        return Signed(min(max(q_x, q_z), 0.0) + d.length())

    def sample_vector(self, p: Vec3) -> Directed:
        a = p.abs()
        r2 = self.radius * self.radius
        if a.z > self.half_length or a.y > self.radius:
            x = FLOAT_MAX
        else:
            x = a.x - _sqrt(r2 - a.y * a.y)
        if a.z > self.half_length or a.x > self.radius:
            y = FLOAT_MAX
        else:
            y = a.y - _sqrt(r2 - a.x * a.x)
        if a.xy().length_squared() > r2:
            z = FLOAT_MAX
        else:
            z = a.z - self.half_length
        return Directed(Vec3(x, y, z))

    def sample_normal(self, p: Vec3) -> Vec3:
        z = abs(p.z) / self.half_length
        r = math.sqrt(p.x * p.x + p.y * p.y) / self.radius
        if z > r:
            return Vec3(0.0, 0.0, p.z)
        return Vec3(p.x, p.y, 0.0)


@dataclass(frozen=True)
class RectangularPrism:
    """An axis-aligned box centred on the origin, given by its half extents."""

    half_extent: Vec3

    def sample_scalar(self, p: Vec3) -> Signed:
        q = p.abs() - self.half_extent
        return Signed(q.max(Vec3.zero()).length() + min(q.max_component(), 0.0))

    def sample_vector(self, p: Vec3) -> Directed:
        a = p.abs()
        h = self.half_extent

        # Each axis is masked out when the point lies beyond the box on
        # either of the other two axes.
        pairs = ((a.yz(), h.yz()), (a.xz(), h.xz()), (a.xy(), h.xy()))
        signs = [
            1.0 if (point - bound).any(lambda f: f > 0.0) else -1.0
            for point, bound in pairs
        ]
        mask = Vec3(*signs) * FLOAT_MAX

        # The closest point on a box is the point clamped to the box bounds.
        if a.x < h.x and a.y < h.y and a.z < h.z:
            closest = a.max(h)
        else:
            closest = a.min(h)
        return Directed((a - closest).max(mask))

    def sample_normal(self, p: Vec3) -> Vec3:
        return p.clamp_to_cardinal_axis()