"""
Atlas Packer
============

Incremental 2D rectangle packing for texture atlases and lightmaps.

This package places axis-aligned rectangles into one fixed-size surface
using a binary space-partitioning tree. Placements are greedy and
irrevocable: once a rectangle is placed it is never moved.

Quick Start
-----------
>>> from atlas_packer import Space
>>> space = Space((10, 10))
>>> space.insert((4, 10))
Rectangle(origin=Point(x=0, y=0), size=Size(width=4, height=10))
>>> space.insert((6, 10)).origin
Point(x=4, y=0)
>>> space.insert((1, 1)) is None
True

Modules
-------
geometry
    Point, Size and Rectangle value types
space
    The packing tree (Space and Node)
orientations
    Candidate orientations for rotatable items
packer
    High-level AtlasPacker class for batch packing
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Atlas Packer Authors"

from .geometry import Point, Rectangle, Size
from .space import Node, Space
from .orientations import get_orientations
from .packer import AtlasPacker, PackingResult, PlacementInfo

__all__ = [
    # Version info
    "__version__",
    # Geometry
    "Point",
    "Rectangle",
    "Size",
    # Packing tree
    "Node",
    "Space",
    # High-level API
    "AtlasPacker",
    "PackingResult",
    "PlacementInfo",
    # Orientation utilities
    "get_orientations",
]
