"""
Tests for fmtsize.constants module.
"""
import pytest
from fmtsize.constants import (
    CONVENTIONAL,
    CONVENTIONAL_LABELS,
    DECIMAL,
    UINT64_MAX,
    Thresholds,
)


class TestThresholds:
    """Tests for the threshold families."""

    def test_conventional_values(self):
        """Test powers of 1024."""
        assert CONVENTIONAL == Thresholds(1024, 1024 ** 2, 1024 ** 3)

    def test_decimal_values(self):
        """Test powers of 1000."""
        assert DECIMAL == Thresholds(1000, 1000 ** 2, 1000 ** 3)

    @pytest.mark.parametrize('family', [CONVENTIONAL, DECIMAL])
    def test_ascending(self, family):
        """Test that thresholds grow by a constant factor."""
        assert family.kilobyte > 0
        assert family.megabyte == family.kilobyte ** 2
        assert family.gigabyte == family.kilobyte ** 3


class TestLabels:
    """Tests for the unit label table."""

    def test_labels(self):
        """Test the label order matches the buckets."""
        assert CONVENTIONAL_LABELS == ('KB', 'MB', 'GB')

    def test_one_label_per_threshold(self):
        """Test that every threshold has a label."""
        assert len(CONVENTIONAL_LABELS) == len(CONVENTIONAL) == len(DECIMAL)


def test_uint64_max():
    """Test the largest accepted byte count."""
    assert UINT64_MAX == 18_446_744_073_709_551_615
