"""Implicit shapes, distance fields, mesh output sinks and feature placement."""

__version__ = "0.1.0"

__all__ = [
    "vector",
    "distance",
    "extractor",
    "primitives",
    "csg",
    "sources",
    "feature",
]