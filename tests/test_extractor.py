from isomesh.extractor import (
    IndexedInterleavedNormals,
    IndexedVertices,
    OnlyInterleavedNormals,
    OnlyVertices,
)
from isomesh.vector import Vec3


class _ScaledNormals:
    """Normal source returning twice the sampled point."""

    def sample_normal(self, p):
        return p * 2.0


P = Vec3(1.0, 2.0, 3.0)
Q = Vec3(-1.0, 0.5, 4.0)


def test_only_vertices_flattens_positions():
    ex = OnlyVertices()
    ex.extract_vertex(P)
    ex.extract_vertex(Q)
    ex.extract_index(7)
    assert ex.vertices == [*P, *Q]


def test_only_vertices_appends_to_given_list():
    store = [9.0]
    ex = OnlyVertices(store)
    ex.extract_vertex(P)
    assert store == [9.0, *P]


def test_only_interleaved_normals():
    source = _ScaledNormals()
    ex = OnlyInterleavedNormals(source)
    ex.extract_vertex(P)
    ex.extract_index(0)
    assert ex.vertices == [*P, *source.sample_normal(P)]
    assert len(ex.vertices) == 6


def test_indexed_vertices_records_indices():
    ex = IndexedVertices()
    ex.extract_vertex(P)
    ex.extract_vertex(Q)
    for i in (0, 1, 0):
        ex.extract_index(i)
    assert ex.vertices == [*P, *Q]
    assert ex.indices == [0, 1, 0]


def test_indexed_interleaved_normals():
    source = _ScaledNormals()
    ex = IndexedInterleavedNormals(source)
    ex.extract_vertex(P)
    ex.extract_vertex(Q)
    ex.extract_index(1)
    assert ex.vertices == [
        *P,
        *source.sample_normal(P),
        *Q,
        *source.sample_normal(Q),
    ]
    assert ex.indices == [1]


def test_vertex_count_matches_stride():
    ex = IndexedInterleavedNormals(_ScaledNormals())
    for v in (P, Q, P):
        ex.extract_vertex(v)
    assert len(ex.vertices) // 6 == 3