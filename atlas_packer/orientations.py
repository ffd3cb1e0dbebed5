"""
2D orientation utilities.

Sprites and lightmap charts can usually be stored rotated by 90 degrees in
an atlas. This produces the candidate sizes to try for an item, in order.
"""

from typing import List

from .geometry import Size


def get_orientations(size: Size, num_orientations: int = 1) -> List[Size]:
    """
    Get the candidate sizes for an item.

    Parameters
    ----------
    size : Size
        Item size in its original orientation.
    num_orientations : int
        Number of orientations to consider:
        - 1: Original only
        - 2: Original, then rotated by 90°

    Returns
    -------
    list of Size
        Sizes to try, original first. Square items only ever get one entry,
        since rotating them changes nothing.

    Raises
    ------
    ValueError
        If num_orientations is not 1 or 2.
    """
    if num_orientations == 1:
        return [size]
    elif num_orientations == 2:
        if size.width == size.height:
            return [size]
        return [size, size.transposed()]
    else:
        raise ValueError(
            f"num_orientations must be 1 or 2, got {num_orientations}"
        )
