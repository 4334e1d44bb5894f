"""
Unit tests for compressibility metrics
"""

import math

import pytest

from blocksort.services.metrics import shannon_entropy, zstd_size, measure_stages


class TestShannonEntropy:
    """Test order-0 entropy"""

    def test_empty(self):
        assert shannon_entropy(b"") == 0.0

    def test_constant(self):
        assert shannon_entropy(b"AAAA") == 0.0

    def test_two_symbols(self):
        assert shannon_entropy(b"ABAB") == pytest.approx(1.0)

    def test_uniform_bytes(self):
        assert shannon_entropy(bytes(range(256))) == pytest.approx(8.0)

    def test_abracadabra(self, abracadabra):
        # A:5 B:2 R:2 C:1 D:1 !:1
        counts = [5, 2, 2, 1, 1, 1]
        expected = -sum(c / 12 * math.log2(c / 12) for c in counts)
        assert shannon_entropy(abracadabra) == pytest.approx(expected)


class TestStageMetrics:
    """Test measurement of each pipeline stage"""

    def test_zstd_size_positive(self, abracadabra):
        assert zstd_size(abracadabra) > 0

    def test_stage_names_and_sizes(self, abracadabra):
        rows = measure_stages(abracadabra)
        assert [row.stage for row in rows] == ['raw', 'bwt', 'bwt+mtf']
        assert [row.size for row in rows] == [12, 16, 16]

    def test_mtf_lowers_entropy_of_repetitive_text(self):
        text = b"the quick brown fox jumps over the lazy dog\n" * 50
        raw, bwt, recoded = measure_stages(text)
        assert recoded.entropy < raw.entropy
