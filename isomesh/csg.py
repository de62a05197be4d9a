"""Constructive solid geometry operations over implicit functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .distance import Directed, Signed
from .vector import Vec3

__all__ = ["Difference", "Intersection", "Union"]


@dataclass(frozen=True)
class Union:
    """Solid wherever either of the two implicit functions is solid."""

    a: Any
    b: Any

    def sample_scalar(self, p: Vec3) -> Signed:
        return Signed(min(self.a.sample_scalar(p).value, self.b.sample_scalar(p).value))

    def sample_vector(self, p: Vec3) -> Directed:
        return Directed(self.a.sample_vector(p).vector.min(self.b.sample_vector(p).vector))

    def sample_normal(self, p: Vec3) -> Vec3:
        return self.a.sample_normal(p).min(self.b.sample_normal(p))


@dataclass(frozen=True)
class Intersection:
    """Solid only where both implicit functions are solid."""

    a: Any
    b: Any

    def sample_scalar(self, p: Vec3) -> Signed:
        return Signed(max(self.a.sample_scalar(p).value, self.b.sample_scalar(p).value))

    def sample_vector(self, p: Vec3) -> Directed:
        return Directed(self.a.sample_vector(p).vector.max(self.b.sample_vector(p).vector))


@dataclass(frozen=True)
class Difference:
    """Solid where ``b`` is solid, except where ``a`` is solid."""

    a: Any
    b: Any

    def sample_scalar(self, p: Vec3) -> Signed:
        return Signed(max(self.b.sample_scalar(p).value, -self.a.sample_scalar(p).value))

    def sample_vector(self, p: Vec3) -> Directed:
        return Directed(self.b.sample_vector(p).vector.max(-self.a.sample_vector(p).vector))