"""Tests for equal-width histograms."""

import pytest

from streamstats.analysis.distribution import compute_field_histogram, compute_histogram
from streamstats.core.models.base import InvalidArgumentError


class TestComputeHistogram:
    """Tests for compute_histogram."""

    def test_equal_width_buckets(self):
        buckets = compute_histogram([0, 1, 2, 3, 4, 5, 6, 7, 8, 10], bins=5)

        assert [b.count for b in buckets] == [2, 2, 2, 2, 2]
        assert [b.label for b in buckets] == ["0-2", "2-4", "4-6", "6-8", "8-10"]
        assert buckets[0].bucket_min == 0.0
        assert buckets[-1].bucket_max == 10.0

    def test_maximum_lands_in_last_bucket(self):
        buckets = compute_histogram([0.0, 10.0], bins=4)

        assert [b.count for b in buckets] == [1, 0, 0, 1]

    def test_interior_edge_belongs_to_right_bucket(self):
        buckets = compute_histogram([0.0, 5.0, 10.0], bins=2)

        assert [b.count for b in buckets] == [1, 2]
        assert buckets[0].bucket_max == buckets[1].bucket_min == 5.0

    def test_buckets_are_contiguous(self):
        buckets = compute_histogram([95.0, 118.0, 128.0, 171.3], bins=7)

        for left, right in zip(buckets, buckets[1:]):
            assert left.bucket_max == right.bucket_min
        assert buckets[0].bucket_min == 95.0
        assert buckets[-1].bucket_max == 171.3

    def test_counts_sum_to_number_of_values(self):
        values = [95.0, 118.0, 120.0, 128.0, 140.0, 150.0, 171.3]

        buckets = compute_histogram(values, bins=30)

        assert len(buckets) == 30
        assert sum(b.count for b in buckets) == len(values)

    def test_ignores_non_numbers(self):
        buckets = compute_histogram([1.0, None, "fast", float("nan"), 3.0], bins=2)

        assert sum(b.count for b in buckets) == 2

    def test_empty_input(self):
        assert compute_histogram([], bins=10) == []

    def test_constant_values_single_bucket(self):
        buckets = compute_histogram([120.0, 120.0, 120.0], bins=10)

        assert len(buckets) == 1
        assert buckets[0].count == 3
        assert buckets[0].label == "120-120"

    def test_labels_round_half_up(self):
        buckets = compute_histogram([0.5, 2.5], bins=1)

        assert buckets[0].label == "1-3"

    def test_default_bins_from_settings(self, monkeypatch):
        monkeypatch.setenv("STREAMSTATS_HISTOGRAM_BINS", "3")

        assert len(compute_histogram([1.0, 2.0, 3.0, 4.0])) == 3

    def test_invalid_bins(self):
        with pytest.raises(InvalidArgumentError):
            compute_histogram([1.0, 2.0], bins=0)


class TestFieldHistogram:
    """Tests for compute_field_histogram."""

    def test_scales_values(self, tracks):
        """duration_ms to minutes."""
        buckets = compute_field_histogram(tracks, "duration_ms", bins=5, scale=1 / 60000)

        assert buckets[0].bucket_min == pytest.approx(0.0)
        assert buckets[-1].bucket_max == pytest.approx(5.0)
        assert sum(b.count for b in buckets) == 6

    def test_unknown_field(self, tracks):
        with pytest.raises(InvalidArgumentError):
            compute_field_histogram(tracks, "loudness", bins=5)
