"""Adapters that position implicit functions inside the unit sampling cube."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .distance import Directed, Signed
from .vector import Vec3

__all__ = ["CenteredSource"]

_CENTER = Vec3.from_scalar(0.5)


@dataclass(frozen=True)
class CenteredSource:
    """Moves an origin-centred implicit function to the centre of the unit cube."""

    source: Any

    def sample_scalar(self, p: Vec3) -> Signed:
        return self.source.sample_scalar(p - _CENTER)

    def sample_vector(self, p: Vec3) -> Directed:
        return self.source.sample_vector(p - _CENTER)

    def sample_normal(self, p: Vec3) -> Vec3:
        return self.source.sample_normal(p - _CENTER)