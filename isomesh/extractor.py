"""Sinks that collect mesh vertices and indices in flat array form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .vector import Vec3


class Extractor(Protocol):
    """Receives mesh vertices and triangle indices."""

    def extract_vertex(self, vertex: Vec3) -> None: ...

    def extract_index(self, index: int) -> None: ...


class _NormalSource(Protocol):
    def sample_normal(self, p: Vec3) -> Vec3: ...


def _checked_index(index: int) -> int:
    """Return ``index`` as an int, rejecting negative values."""
    value = int(index)
    if value < 0:
        raise ValueError(f"vertex index must be non-negative, got {value}")
    return value


@dataclass
class OnlyVertices:
    """Collect vertex positions as a flat list of floats; indices are dropped."""

    vertices: list[float] = field(default_factory=list)

    def extract_vertex(self, vertex: Vec3) -> None:
        self.vertices.extend(vertex)

    def extract_index(self, index: int) -> None:
        # Face data is discarded, but the index must still be a valid one.
        _checked_index(index)


@dataclass
class OnlyInterleavedNormals:
    """Collect positions interleaved with sampled normals; indices are dropped."""

    source: _NormalSource
    vertices: list[float] = field(default_factory=list)

    def extract_vertex(self, vertex: Vec3) -> None:
        normal = self.source.sample_normal(vertex)
        self.vertices.extend(vertex)
        self.vertices.extend(normal)

    def extract_index(self, index: int) -> None:
        # Face data is discarded, but the index must still be a valid one.
        _checked_index(index)


@dataclass
class IndexedVertices:
    """Collect vertex positions and triangle indices."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def extract_vertex(self, vertex: Vec3) -> None:
        self.vertices.extend(vertex)

    def extract_index(self, index: int) -> None:
        self.indices.append(_checked_index(index))


@dataclass
class IndexedInterleavedNormals:
    """Collect positions interleaved with sampled normals, plus triangle indices."""

    source: _NormalSource
    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def extract_vertex(self, vertex: Vec3) -> None:
        normal = self.source.sample_normal(vertex)
        self.vertices.extend(vertex)
        self.vertices.extend(normal)

    def extract_index(self, index: int) -> None:
        self.indices.append(_checked_index(index))