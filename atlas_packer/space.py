"""
Binary space-partitioning tree for incremental rectangle packing.

A :class:`Space` owns a tree of :class:`Node` objects. Each node governs a
region of the packing surface and is either a leaf (free or taken) or an
internal node whose two children exactly tile its bounds. Inserting a size
walks the tree depth-first, first child before second, and splits the first
free leaf that is large enough. Placements are never moved or removed.

The split rule follows the lightmap packing scheme described at
http://www.blackpawn.com/texts/lightmaps/default.html: the leaf is cut
along the axis with more leftover room, so the child that receives the
request stays as close to the requested footprint as possible.

Examples
--------
>>> from atlas_packer import Space
>>> space = Space((10, 10))
>>> space.insert((4, 10)).as_tuple()
(0, 0, 4, 10)
>>> space.insert((6, 10)).as_tuple()
(4, 0, 6, 10)
>>> space.insert((1, 1)) is None
True
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

from .geometry import Number, Point, Rectangle, Size

logger = logging.getLogger(__name__)

SizeLike = Union[Size, Tuple[int, int]]


class Node:
    """
    One region of the packing surface.

    Parameters
    ----------
    bounds : Rectangle
        The region this node governs. Fixed for the node's lifetime.

    Attributes
    ----------
    bounds : Rectangle
        The governed region.
    children : tuple
        ``(None, None)`` for a leaf, two ``Node`` objects otherwise.
    taken : bool
        Whether a rectangle has been committed to this leaf.
    """

    __slots__ = ("bounds", "children", "taken")

    def __init__(self, bounds: Rectangle):
        self.bounds = bounds
        self.children: Tuple[Optional[Node], Optional[Node]] = (None, None)
        self.taken = False

    @property
    def is_leaf(self) -> bool:
        return self.children[0] is None

    def insert(self, size: Size) -> Optional[Rectangle]:
        """
        Place a rectangle of ``size`` somewhere inside this node.

        The search is depth-first, first child before second, and runs on
        an explicit stack, so its depth is not bounded by the interpreter's
        recursion limit.

        Parameters
        ----------
        size : Size
            Requested size.

        Returns
        -------
        Rectangle or None
            The bounds of the leaf that now holds the request, or None if
            there is no room in this subtree.
        """
        stack = [self]
        while stack:
            node = stack.pop()
            if not node.is_leaf:
                stack.append(node.children[1])
                stack.append(node.children[0])
                continue

            if node.taken:
                continue

            bounds = node.bounds
            if not size.fits_in(bounds.size):
                continue

            # Exact fit consumes the whole leaf
            if bounds.size == size:
                node.taken = True
                return bounds

            delta_width = bounds.width - size.width
            delta_height = bounds.height - size.height

            # Equal leftovers split horizontally
            if delta_width > delta_height:
                node.children = (
                    Node(Rectangle(bounds.origin, Size(size.width, bounds.height))),
                    Node(Rectangle(
                        Point(bounds.x + size.width, bounds.y),
                        Size(delta_width, bounds.height),
                    )),
                )
            else:
                node.children = (
                    Node(Rectangle(bounds.origin, Size(bounds.width, size.height))),
                    Node(Rectangle(
                        Point(bounds.x, bounds.y + size.height),
                        Size(bounds.width, delta_height),
                    )),
                )

            # The first child always fits the request
            stack.append(node.children[0])

        return None

    def iter_leaves(self) -> Iterator["Node"]:
        """Yield the leaves of this subtree, first child before second."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.is_leaf:
                yield node
            else:
                stack.append(node.children[1])
                stack.append(node.children[0])

    def __repr__(self) -> str:
        state = "taken" if self.taken else ("leaf" if self.is_leaf else "split")
        return f"Node(bounds={self.bounds.as_tuple()}, {state})"


class Space:
    """
    A fixed-size packing surface.

    Parameters
    ----------
    size : Size or tuple of int
        Dimensions of the surface as ``(width, height)``.

    Notes
    -----
    A ``Space`` holds no lock. Callers sharing one between threads must
    serialize calls to :meth:`insert` themselves.

    Examples
    --------
    >>> space = Space((10, 10))
    >>> space.insert((10, 10)).as_tuple()
    (0, 0, 10, 10)
    >>> space.insert((1, 1)) is None
    True
    """

    def __init__(self, size: SizeLike):
        self._root = Node(Rectangle(Point(0, 0), Size.of(size)))

    @property
    def root(self) -> Node:
        return self._root

    @property
    def size(self) -> Size:
        return self._root.bounds.size

    def get_size(self) -> Size:
        """Return the dimensions of the surface."""
        return self.size

    def insert(self, size: SizeLike) -> Optional[Rectangle]:
        """
        Allocate a rectangle of ``size`` on the surface.

        Parameters
        ----------
        size : Size or tuple of int
            Requested ``(width, height)``.

        Returns
        -------
        Rectangle or None
            Where the rectangle was placed, or None if there was no room.
        """
        size = Size.of(size)
        result = self._root.insert(size)
        if result is None:
            logger.debug("No room for %sx%s in %r", size.width, size.height, self)
        return result

    def node_count(self) -> int:
        """Total number of nodes in the tree, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            if not node.is_leaf:
                stack.extend(node.children)
        return count

    def used_area(self) -> Number:
        """Sum of the areas of all taken leaves."""
        return sum(leaf.bounds.area for leaf in self._root.iter_leaves() if leaf.taken)

    def free_rectangles(self) -> List[Rectangle]:
        """Bounds of every leaf that is still free, in search order."""
        return [leaf.bounds for leaf in self._root.iter_leaves() if not leaf.taken]

    def __repr__(self) -> str:
        return f"Space(size={self.size.as_tuple()})"
