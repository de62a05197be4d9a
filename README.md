# isomesh

Building blocks for turning implicit surfaces into meshes. The package has
vectors, two kinds of distance, primitive shapes, constructive solid
geometry, sinks that collect mesh output, and placement of vertices on sharp
features of a surface.

## Installation

```
pip install isomesh
```

NumPy is the only dependency.

## Vectors

`isomesh.vector` provides `Vec2` and `Vec3`. They are small immutable
dataclasses with arithmetic (`+`, `-`, unary `-`, and `*` and `/` by a
scalar or componentwise by another vector). They can also be iterated.

`Vec3` has these methods:

- `zero()` and `from_scalar(value)` to construct vectors.
- `dot`, `cross`, `length` and `length_squared`.
- `normalised()`, which returns `None` for the zero vector.
- `abs`, and the componentwise `min` and `max`.
- `max_component` and `max_component_index`. The index is the first one on ties.
- `lerp(other, factor)` and `any(predicate)`.
- The swizzles `xy()`, `yz()` and `xz()`, which return `Vec2`.
- `clamp_to_cardinal_axis()`, which keeps only the component of greatest magnitude.

Components can also be read by index (`v[0]`).

`Vec2` has `from_scalar`, `length`, `length_squared`, `any`, and
`extend(z)`, which builds a `Vec3`.

`isomesh.vector.FLOAT_MAX` is the largest finite single-precision float. A
directed distance uses it on any axis where the line through the point does
not meet the surface.

## Distances

`isomesh.distance` has two kinds of distance:

- `Signed(value)` is a single signed distance to the surface.
- `Directed(vector)` is a signed distance along each of the three axes.

Both kinds provide the same methods:

- `zero()`.
- `is_positive()`. This is true outside the surface. For `Directed` it is true when any component is positive.
- `lerp(other, factor)`.
- `within_extent(extent)`. This compares against the cube half-diagonal `extent * sqrt(3)`.
- The static `find_crossing_point(a, b, p_a, p_b)`. It returns the point between two grid points where the distance crosses zero, and the midpoint when the two distances are equal. `Directed` only looks at the dominant axis of the segment.

## Shapes

`isomesh.primitives` defines four shapes, each centred on the origin:

- `Sphere(radius)`.
- `Torus(radius, tube_radius)`, which lies in the xy plane.
- `Cylinder(radius, half_length)`, a capped cylinder along z.
- `RectangularPrism(half_extent)`, an axis-aligned box.

Each primitive answers three queries:

- `sample_scalar(p)` returns a `Signed` distance.
- `sample_vector(p)` returns a `Directed` distance.
- `sample_normal(p)` returns an unnormalised normal direction.

`isomesh.csg` combines shapes:

- `Union(a, b)` answers all three queries. Its normal is the componentwise minimum of the two normals.
- `Intersection(a, b)` answers `sample_scalar` and `sample_vector`.
- `Difference(a, b)` answers `sample_scalar` and `sample_vector`. It removes `a` from `b`.

```python
from isomesh.vector import Vec3
from isomesh.primitives import RectangularPrism, Sphere
from isomesh.csg import Difference

shape = Difference(Sphere(0.25), RectangularPrism(Vec3.from_scalar(0.2)))
print(shape.sample_scalar(Vec3.zero()).value)   # 0.25
```

`isomesh.sources.CenteredSource(source)` shifts every query by
(0.5, 0.5, 0.5). The centre of the unit cube from (0, 0, 0) to (1, 1, 1)
then falls on the wrapped shape's origin.

## Collecting mesh output

`isomesh.extractor` has four dataclasses that gather output into flat lists.
Each receives vertices through `extract_vertex(vertex)` and triangle indices
through `extract_index(index)`.

- `OnlyVertices()` collects `vertices` as x, y, z floats. It drops indices.
- `OnlyInterleavedNormals(source)` collects positions, each followed by the normal that `source.sample_normal` gives there. It drops indices.
- `IndexedVertices()` collects positions in `vertices` and indices in `indices`.
- `IndexedInterleavedNormals(source)` collects interleaved positions and normals in `vertices`, and indices in `indices`.

A negative index raises `ValueError`, even in the variants that drop indices.

## Feature placement

`isomesh.feature` helps place a vertex on a sharp edge or corner inside a
grid cell.

- `TangentPlanes.from_points(vertices, normals)` builds a `Plane` through each point. Each plane's offset is taken relative to the points' centre of mass. The method also classifies the region as `LocalTopology.PLANAR`, `EDGE` or `CORNER`, using a 30-degree angle threshold. It raises `ValueError` on an empty input or on lists of different lengths.
- `TangentPlanes.from_corners(corners, normals)` does the same for the eight corners of a cell.
- `Plane` has `distance(p)` and `point_closest_to(p)`.
- `ParticleBasedMinimisation().place_feature_in_cell(corners, normals)` starts a particle at the centre of mass. It moves the particle along forces interpolated trilinearly from the corners, for at most 100 steps.
- `MinimiseQEF().place_feature_in_cell(corners, normals)` minimises the error against the tangent planes by singular value decomposition. Its static `place_feature_with_tangents(tangents)` does the same for ready-made `TangentPlanes`. For planar regions both return the centre of mass. For edges they drop the smallest singular value.

## What the package does not do

The package contains no meshing algorithm. It has no marching cubes,
extended marching cubes, octree-based marching cubes or dual contouring. It
also has no grid sampling or traversal that would drive the extractors over
a volume. It supplies the distance fields, shapes, output sinks and feature
placement that such an algorithm would use. It has no command-line program
and no viewer.

## Running the tests

```
pip install -e ".[test]"
pytest
```