"""
Pytest fixtures for atlas_packer tests.

This module provides reusable test fixtures including:
- Empty spaces of various sizes
- Deterministic batches of sprite sizes
- Sample image arrays
- AtlasPacker instances
"""

import random

import numpy as np
import pytest


# =============================================================================
# Space Fixtures
# =============================================================================

@pytest.fixture
def space_10x10():
    """Empty 10x10 packing space."""
    from atlas_packer import Space
    return Space((10, 10))


@pytest.fixture
def space_256():
    """Empty 256x256 packing space."""
    from atlas_packer import Space
    return Space((256, 256))


# =============================================================================
# Item Fixtures
# =============================================================================

@pytest.fixture
def sprite_sizes():
    """Sixty reproducible sprite sizes between 1 and 48 pixels per side."""
    rng = random.Random(1234)
    return [(rng.randint(1, 48), rng.randint(1, 48)) for _ in range(60)]


@pytest.fixture
def power_of_two_sizes():
    """Sizes that tile a 64x64 surface exactly when packed largest first."""
    return [(32, 32)] * 3 + [(16, 16)] * 4


@pytest.fixture
def gray_image():
    """A single-channel 10 high, 4 wide image."""
    return np.zeros((10, 4), dtype=np.uint8)


@pytest.fixture
def rgba_image():
    """A four-channel 10 high, 6 wide image."""
    return np.zeros((10, 6, 4), dtype=np.uint8)


# =============================================================================
# AtlasPacker Fixtures
# =============================================================================

@pytest.fixture
def packer_small():
    """AtlasPacker with a 10x10 atlas."""
    from atlas_packer import AtlasPacker
    return AtlasPacker(atlas_size=(10, 10))


@pytest.fixture
def packer_medium():
    """AtlasPacker with a 256x256 atlas."""
    from atlas_packer import AtlasPacker
    return AtlasPacker(atlas_size=(256, 256))


@pytest.fixture
def packer_rotating():
    """AtlasPacker with a 256x256 atlas that may rotate items."""
    from atlas_packer import AtlasPacker
    return AtlasPacker(atlas_size=(256, 256), num_orientations=2)
