"""
Tests for orientation sampling.
"""

import pytest

from atlas_packer import Size, get_orientations


class TestGetOrientations:
    """Tests for get_orientations."""

    def test_single_orientation(self):
        assert get_orientations(Size(3, 7)) == [Size(3, 7)]

    def test_two_orientations_original_first(self):
        assert get_orientations(Size(3, 7), 2) == [Size(3, 7), Size(7, 3)]

    def test_square_has_one_orientation(self):
        """Rotating a square gives the same size, so it is tried once."""
        assert get_orientations(Size(5, 5), 2) == [Size(5, 5)]

    @pytest.mark.parametrize("count", [0, 3, 4, 24])
    def test_invalid_count(self, count):
        with pytest.raises(ValueError):
            get_orientations(Size(3, 7), count)
