#!/usr/bin/env python3
"""
Basic Packing Example
=====================

This example demonstrates the basic usage of the atlas_packer library
for texture atlas packing.

It shows how to:
1. Create an AtlasPacker with a specified atlas size
2. Pack a batch of sprite sizes into the atlas
3. Access packing results and statistics
4. Drive a Space directly for incremental allocation

Requirements:
    - atlas_packer package
    - numpy

Usage:
    python basic_packing.py
"""

import logging
import random


def create_sample_sprites():
    """Create some sample sprite sizes for packing.

    Returns a list of (width, height) tuples.
    """
    rng = random.Random(7)
    sprites = []

    # A few large backgrounds
    sprites += [(128, 128), (256, 64)]

    # Character frames
    sprites += [(32, 48)] * 12

    # Tall UI bars
    sprites += [(16, 96)] * 4

    # Assorted small icons
    for _ in range(30):
        sprites.append((rng.randint(8, 24), rng.randint(8, 24)))

    return sprites


def main():
    """Run the basic packing example."""
    from atlas_packer import AtlasPacker, Space

    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

    print("Atlas Packer - Basic Example")
    print("=" * 40)

    # Create a packer with a 512x512 atlas that may rotate sprites
    print("\nCreating packer with 512x512 atlas...")
    packer = AtlasPacker(atlas_size=(512, 512), num_orientations=2)

    sprites = create_sample_sprites()
    print(f"Packing {len(sprites)} sprites...")
    result = packer.pack_sizes(sprites)

    print()
    print(result.summary())

    print("\nFirst placements:")
    for p in result.placements[:5]:
        if p.success:
            flag = " (rotated)" if p.rotated else ""
            print(f"  Sprite {p.item_index}: {p.rectangle.as_tuple()}{flag}")
        else:
            print(f"  Sprite {p.item_index}: no room")

    # Incremental allocation against a single surface
    print("\nIncremental allocation:")
    space = Space((10, 10))
    for size in [(4, 10), (6, 10), (1, 1)]:
        placed = space.insert(size)
        where = placed.as_tuple() if placed is not None else "no room"
        print(f"  insert{size} -> {where}")


if __name__ == "__main__":
    main()
