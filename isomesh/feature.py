"""Placement of mesh vertices on sharp features of an implicit surface."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from itertools import product
from typing import Protocol, Sequence

import numpy as np

from .vector import FLOAT_MAX, Vec3

__all__ = [
    "LocalTopology",
    "MinimiseQEF",
    "ParticleBasedMinimisation",
    "PlaceFeatureInCell",
    "Plane",
    "TangentPlanes",
]

# cos(30 degrees): normals closer than this are treated as the same plane.
FEATURE_ANGLE = 0.8660254037844387

_STEP_SIZE = 0.05
_THRESHOLD = 0.02
_MAX_ITERATIONS = 100
_SINGULAR_TOLERANCE = 1e-10


class PlaceFeatureInCell(Protocol):
    """Places a vertex as close as possible to a feature within a grid cell."""

    def place_feature_in_cell(self, corners: Sequence[Vec3], normals: Sequence[Vec3]) -> Vec3: ...


class LocalTopology(Enum):
    """Shape of the surface within a sampled region."""

    PLANAR = auto()
    EDGE = auto()
    CORNER = auto()


@dataclass(frozen=True)
class Plane:
    """A plane given by its normal and offset along that normal."""

    normal: Vec3
    d: float

    def distance(self, p: Vec3) -> float:
        """Signed distance from ``p`` to the plane."""
        return self.normal.dot(p) - self.d

    def point_closest_to(self, p: Vec3) -> Vec3:
        """Projection of ``p`` onto the plane."""
        return p - self.normal * self.distance(p)


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


@dataclass(frozen=True)
class TangentPlanes:
    """Planes tangent to the surface within a cell, relative to their centre of mass."""

    planes: tuple[Plane, ...]
    center_of_mass: Vec3
    feature: LocalTopology

    @classmethod
    def from_points(cls, vertices: Sequence[Vec3], normals: Sequence[Vec3]) -> TangentPlanes:
        """Build tangent planes from surface points and the normals at them."""
        vertices = list(vertices)
        normals = list(normals)
        if len(vertices) != len(normals):
            raise ValueError("vertices and normals must have the same length")
        if not vertices:
            raise ValueError("at least one point is required")

        axis = Vec3.zero()
        min_angle = FLOAT_MAX
        for n_i, n_j in product(normals, repeat=2):
            angle = n_i.dot(n_j)
            if angle < min_angle:
                axis = n_i.cross(n_j)
                min_angle = angle

        center_of_mass = sum(vertices, Vec3.zero()) / len(vertices)

        if min_angle > FEATURE_ANGLE:
            feature = LocalTopology.PLANAR
        else:
            axis = axis.normalised() or Vec3.zero()
            projections = [axis.dot(n) for n in normals]
            c = max(abs(min(min(projections), 1.0)), abs(max(max(projections), -1.0)))
            c = _sqrt(1.0 - c * c)
            feature = LocalTopology.EDGE if c > FEATURE_ANGLE else LocalTopology.CORNER

        planes = tuple(
            Plane(normal, (vertex - center_of_mass).dot(normal))
            for vertex, normal in zip(vertices, normals)
        )
        return cls(planes, center_of_mass, feature)

    @classmethod
    def from_corners(cls, corners: Sequence[Vec3], normals: Sequence[Vec3]) -> TangentPlanes:
        """Build tangent planes from cell corners and the surface normals there."""
        return cls.from_points(corners, normals)


class ParticleBasedMinimisation:
    """Moves a particle through the cell along interpolated plane forces."""

    def place_feature_in_cell(self, corners: Sequence[Vec3], normals: Sequence[Vec3]) -> Vec3:
        tangents = TangentPlanes.from_corners(corners, normals)
        max_feature_size = corners[6].x - corners[0].x

        forces = [
            sum(
                (corner - plane.point_closest_to(corner) for plane in tangents.planes),
                Vec3.zero(),
            )
            for corner in corners
        ]

        particle = tangents.center_of_mass
        for _ in range(_MAX_ITERATIONS):
            force = _trilinear(corners, forces, particle) * _STEP_SIZE * max_feature_size
            particle = particle + force
            if force.length_squared() < _THRESHOLD * max_feature_size:
                break
        return particle


def _trilinear(corners: Sequence[Vec3], forces: Sequence[Vec3], p: Vec3) -> Vec3:
    f = (p - corners[0]) / (Vec3(corners[1].x, corners[3].y, corners[4].z) - corners[0])

    c00 = (1.0 - f.x) * forces[0] + f.x * forces[1]
    c01 = (1.0 - f.x) * forces[4] + f.x * forces[5]
    c10 = (1.0 - f.x) * forces[3] + f.x * forces[2]
    c11 = (1.0 - f.x) * forces[7] + f.x * forces[6]

    c0 = (1.0 - f.y) * c00 + f.y * c10
    c1 = (1.0 - f.y) * c01 + f.y * c11

    return (1.0 - f.z) * c0 + f.z * c1


class MinimiseQEF:
    """Minimises the quadratic error of the tangent planes by singular value decomposition."""

    def place_feature_in_cell(self, corners: Sequence[Vec3], normals: Sequence[Vec3]) -> Vec3:
        return self.place_feature_with_tangents(TangentPlanes.from_corners(corners, normals))

    @staticmethod
    def place_feature_with_tangents(tangents: TangentPlanes) -> Vec3:
        """Place a vertex on the feature described by ``tangents``."""
        if tangents.feature is LocalTopology.PLANAR:
            return tangents.center_of_mass

        matrix = np.array([list(p.normal) for p in tangents.planes], dtype=np.float64)
        rhs = np.array([p.d for p in tangents.planes], dtype=np.float64)

        u, s, vt = np.linalg.svd(matrix)
        singular = np.zeros(3)
        singular[: len(s)] = s

        # Edges leave the system underdetermined, so drop the weakest direction.
        if tangents.feature is LocalTopology.EDGE:
            singular[int(np.argmin(singular))] = 0.0

        tolerance = _SINGULAR_TOLERANCE * max(float(singular.max()), 1.0)
        solution = np.zeros(3)
        for i in range(len(s)):
            if singular[i] > tolerance:
                solution += (u[:, i] @ rhs / singular[i]) * vt[i]

        return tangents.center_of_mass + Vec3(*(float(c) for c in solution))