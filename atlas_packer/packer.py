"""
High-level atlas packing interface.

This module provides the AtlasPacker class, which packs batches of
rectangles (or images) into a single fixed-size atlas using a
:class:`~atlas_packer.space.Space`, along with the PackingResult and
PlacementInfo dataclasses describing the outcome.

Examples
--------
>>> from atlas_packer import AtlasPacker
>>> packer = AtlasPacker(atlas_size=(256, 256))
>>> result = packer.pack_sizes([(128, 64), (64, 64), (32, 180)])
>>> print(f"Packed {result.num_placed}/{result.num_placed + result.num_failed} items")
Packed 3/3 items
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Integral
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .geometry import Rectangle, Size
from .orientations import get_orientations
from .space import Space

logger = logging.getLogger(__name__)


@dataclass
class PlacementInfo:
    """Information about a single item placement.

    Attributes
    ----------
    item_index : int
        Original index of the item in the input list.
    rectangle : Rectangle or None
        Region of the atlas holding the item, or None if placement failed.
        For a rotated item this has the transposed size.
    success : bool
        Whether the item was successfully placed.
    area : int
        Area of the item in pixels.
    orientation_index : int
        Index of the orientation used (0 = original, 1 = rotated by 90°).
    """

    item_index: int
    rectangle: Optional[Rectangle]
    success: bool
    area: int = 0
    orientation_index: int = 0

    @property
    def position(self) -> Optional[Tuple[int, int]]:
        """(x, y) of the top-left corner, or None if placement failed."""
        if self.rectangle is None:
            return None
        return self.rectangle.origin.as_tuple()

    @property
    def rotated(self) -> bool:
        return self.orientation_index == 1


@dataclass
class PackingResult:
    """Results from a packing operation.

    Attributes
    ----------
    atlas : np.ndarray
        Occupancy map of shape (height, width). Each placed item's pixels
        are marked with a unique ID (1, 2, 3, ...) in placement order;
        0 means free. Zero-area items are rejected before packing, so
        every ID from 1 to ``num_placed`` covers at least one pixel.
    placements : list of PlacementInfo
        Placement information for each item, ordered by input index.
    num_placed : int
        Number of items successfully placed.
    num_failed : int
        Number of items that could not be placed.
    density : float
        Packing density (occupied area / bounding box area).
    total_area : int
        Total number of occupied pixels.
    bounding_box : tuple
        ((min_x, min_y), (max_x, max_y)) of the occupied region, inclusive.
    """

    atlas: np.ndarray
    placements: List[PlacementInfo] = field(default_factory=list)
    num_placed: int = 0
    num_failed: int = 0
    density: float = 0.0
    total_area: int = 0
    bounding_box: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None

    def get_item_mask(self, item_id: int) -> np.ndarray:
        """
        Get a binary mask for a specific item.

        Parameters
        ----------
        item_id : int
            The ID of the item (1-indexed, in placement order).

        Returns
        -------
        np.ndarray
            Boolean mask where True indicates pixels belonging to the item.
        """
        return self.atlas == item_id

    def summary(self) -> str:
        """Get a human-readable summary of the packing result."""
        height, width = self.atlas.shape
        lines = [
            "Packing Result Summary",
            "=" * 40,
            f"Items placed:    {self.num_placed}",
            f"Items failed:    {self.num_failed}",
            f"Success rate:    {self.num_placed / max(1, self.num_placed + self.num_failed):.1%}",
            f"Packing density: {self.density:.1%}",
            f"Total area:      {self.total_area} pixels",
            f"Atlas size:      {width}x{height}",
        ]
        if self.bounding_box:
            bbox_min, bbox_max = self.bounding_box
            lines.append(f"Bounding box:    {bbox_min} to {bbox_max}")
        return "\n".join(lines)


def _is_int(value) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class AtlasPacker:
    """
    Pack rectangles into a single fixed-size atlas.

    Every pack call starts from a fresh :class:`Space`, inserts the items
    one by one and reports which ones fit. Items that do not fit are
    reported as failed placements; nothing is raised for running out of
    room.

    Parameters
    ----------
    atlas_size : tuple of int
        Size of the atlas as (width, height).
    num_orientations : int, default 1
        Number of orientations to try for each item.
        Valid values: 1 (original only), 2 (original, then rotated by 90°).

    Attributes
    ----------
    atlas_size : Size
        The atlas dimensions.
    num_orientations : int
        Number of orientations to try.

    Examples
    --------
    >>> packer = AtlasPacker(atlas_size=(400, 50), num_orientations=2)
    >>> result = packer.pack_sizes([(300, 50), (50, 100)])
    >>> for p in result.placements:
    ...     if p.success:
    ...         print(p.item_index, p.position, p.rotated)
    0 (0, 0) False
    1 (300, 0) True
    """

    def __init__(
        self,
        atlas_size: Union[Size, Tuple[int, int]],
        num_orientations: int = 1,
    ):
        if isinstance(atlas_size, Size):
            width, height = atlas_size.as_tuple()
        else:
            if not isinstance(atlas_size, Sequence):
                raise ValueError(f"atlas_size must be a 2-tuple, got {atlas_size!r}")
            if len(atlas_size) != 2:
                raise ValueError(f"atlas_size must be a 2-tuple, got {len(atlas_size)} elements")
            width, height = atlas_size
        if not (_is_int(width) and _is_int(height)):
            raise ValueError(f"atlas_size dimensions must be integers, got {(width, height)}")
        if width <= 0 or height <= 0:
            raise ValueError(f"atlas_size dimensions must be positive, got {(width, height)}")
        if num_orientations not in (1, 2):
            raise ValueError(f"num_orientations must be 1 or 2, got {num_orientations}")

        self.atlas_size = Size(int(width), int(height))
        self.num_orientations = num_orientations

    def new_space(self) -> Space:
        """Create an empty space the size of the atlas."""
        return Space(self.atlas_size)

    def pack_sizes(
        self,
        sizes: Sequence[Union[Size, Tuple[int, int]]],
        sort_by_area: bool = True,
    ) -> PackingResult:
        """
        Pack rectangles given by their sizes.

        Parameters
        ----------
        sizes : sequence of Size or (width, height)
            Item sizes in pixels.
        sort_by_area : bool, default True
            Sort items by area (largest first) before packing. Items of
            equal area keep their input order.

        Returns
        -------
        PackingResult
            Packing results including the occupancy atlas and statistics.

        Raises
        ------
        ValueError
            If sizes is empty or contains non-integer, negative or
            zero-area sizes.
        """
        if len(sizes) == 0:
            raise ValueError("sizes list cannot be empty")

        items = []
        for i, value in enumerate(sizes):
            try:
                size = Size.of(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Item {i} is not a valid size: {e}") from e
            if not (_is_int(size.width) and _is_int(size.height)):
                raise ValueError(f"Item {i} must have integer dimensions, got {size.as_tuple()}")
            if size.area == 0:
                raise ValueError(f"Item {i} has zero area, got {size.as_tuple()}")
            items.append(size)

        return self._pack(items, sort_by_area)

    def pack_arrays(
        self,
        images: Sequence[np.ndarray],
        sort_by_area: bool = True,
    ) -> PackingResult:
        """
        Pack images given as arrays.

        Parameters
        ----------
        images : sequence of np.ndarray
            Arrays of shape (height, width) or (height, width, channels).
            Only their shapes are used.
        sort_by_area : bool, default True
            Sort items by area (largest first) before packing.

        Returns
        -------
        PackingResult
            Packing results including the occupancy atlas and statistics.

        Raises
        ------
        ValueError
            If images is empty or contains invalid or empty arrays.
        """
        if len(images) == 0:
            raise ValueError("images list cannot be empty")

        items = []
        for i, image in enumerate(images):
            if not isinstance(image, np.ndarray):
                raise ValueError(f"Item {i} is not a numpy array")
            if image.ndim not in (2, 3):
                raise ValueError(f"Item {i} must be 2D or 3D, got {image.ndim}D")
            if image.shape[0] == 0 or image.shape[1] == 0:
                raise ValueError(f"Item {i} has zero area, got shape {image.shape}")
            items.append(Size(int(image.shape[1]), int(image.shape[0])))

        return self._pack(items, sort_by_area)

    def pack_single(
        self,
        size: Union[Size, Tuple[int, int]],
        space: Optional[Space] = None,
    ) -> Tuple[Optional[Rectangle], bool, int]:
        """
        Insert one item, trying each orientation in turn.

        Parameters
        ----------
        size : Size or (width, height)
            Item size.
        space : Space, optional
            Space to insert into. If None, uses an empty one.

        Returns
        -------
        rectangle : Rectangle or None
            Placement, or None if no orientation fits.
        found : bool
            Whether a placement was found.
        orientation_index : int
            Orientation used, or 0 if not found.
        """
        if space is None:
            space = self.new_space()

        for orient_idx, oriented in enumerate(
            get_orientations(Size.of(size), self.num_orientations)
        ):
            rectangle = space.insert(oriented)
            if rectangle is not None:
                return rectangle, True, orient_idx
        return None, False, 0

    def _pack(self, items: List[Size], sort_by_area: bool) -> PackingResult:
        areas = np.array([item.area for item in items], dtype=np.int64)

        if sort_by_area:
            original_indices = np.argsort(-areas, kind="stable").tolist()
        else:
            original_indices = list(range(len(items)))

        space = self.new_space()
        atlas = np.zeros((self.atlas_size.height, self.atlas_size.width), dtype=np.int32)

        placements = []
        num_placed = 0

        for orig_idx in original_indices:
            item = items[orig_idx]
            rectangle, found, orient_idx = self.pack_single(item, space)

            if found:
                # item_id is 1-indexed
                num_placed += 1
                atlas[rectangle.y:rectangle.bottom, rectangle.x:rectangle.right] = num_placed
                placements.append(PlacementInfo(
                    item_index=orig_idx,
                    rectangle=rectangle,
                    success=True,
                    area=int(areas[orig_idx]),
                    orientation_index=orient_idx,
                ))
            else:
                logger.debug(
                    "Item %d (%dx%d) does not fit", orig_idx, item.width, item.height
                )
                placements.append(PlacementInfo(
                    item_index=orig_idx,
                    rectangle=None,
                    success=False,
                    area=int(areas[orig_idx]),
                ))

        # Sort placements by original index for consistent ordering
        placements.sort(key=lambda p: p.item_index)

        density, total_area, bbox = self._calculate_stats(atlas)

        logger.info(
            "Packed %d/%d items into %dx%d atlas (density %.1f%%)",
            num_placed, len(items), self.atlas_size.width, self.atlas_size.height,
            density * 100,
        )

        return PackingResult(
            atlas=atlas,
            placements=placements,
            num_placed=num_placed,
            num_failed=len(items) - num_placed,
            density=density,
            total_area=total_area,
            bounding_box=bbox,
        )

    def _calculate_stats(
        self, atlas: np.ndarray
    ) -> Tuple[float, int, Optional[Tuple[Tuple[int, int], Tuple[int, int]]]]:
        """Calculate packing statistics."""
        occupied = np.sum(atlas > 0)
        total_area = int(occupied)

        if occupied == 0:
            return 0.0, 0, None

        # Rows are y, columns are x
        ys, xs = np.nonzero(atlas)
        bbox_min = (int(xs.min()), int(ys.min()))
        bbox_max = (int(xs.max()), int(ys.max()))
        bbox_area = (bbox_max[0] - bbox_min[0] + 1) * (bbox_max[1] - bbox_min[1] + 1)

        density = float(occupied / bbox_area) if bbox_area > 0 else 0.0

        return density, total_area, (bbox_min, bbox_max)

    def __repr__(self) -> str:
        return (
            f"AtlasPacker(atlas_size={self.atlas_size.as_tuple()}, "
            f"num_orientations={self.num_orientations})"
        )
