"""
Pytest configuration and shared fixtures for blocksort tests
"""

import random

import pytest
from typing import List


@pytest.fixture(scope="session")
def test_data_dir(tmp_path_factory):
    """Create temporary directory with sample input files"""
    data_dir = tmp_path_factory.mktemp("test_data")

    (data_dir / "abra.txt").write_bytes(b"ABRACADABRA!")
    (data_dir / "apache.log").write_bytes(
        b"[Thu Jun 09 06:07:04 2005] [notice] LDAP: Built with OpenLDAP\n"
        b"[Thu Jun 09 06:07:05 2005] [error] Factory error creating channel\n"
        b"[Thu Jun 09 06:07:19 2005] [notice] Apache/2.0.49 configured\n" * 20
    )
    (data_dir / "empty.bin").write_bytes(b"")

    return data_dir


@pytest.fixture(scope="session")
def test_output_dir(tmp_path_factory):
    """Create temporary output directory for transformed files"""
    return tmp_path_factory.mktemp("test_output")


@pytest.fixture
def abracadabra() -> bytes:
    return b"ABRACADABRA!"


@pytest.fixture
def random_block() -> bytes:
    """Reproducible block of arbitrary bytes, every value likely present"""
    rng = random.Random(1234)
    return bytes(rng.randrange(256) for _ in range(2000))


@pytest.fixture
def sample_blocks() -> List[bytes]:
    """Inputs covering empty, single-byte, periodic and binary content"""
    return [
        b"",
        b"A",
        b"AA",
        b"AAAA",
        b"ABAB",
        b"ABCABCABC",
        b"banana",
        b"ABRACADABRA!",
        b"mississippi",
        b"\x00\x00\xff\xff\x00",
        bytes(range(256)),
        bytes(range(255, -1, -1)),
        b"the quick brown fox jumps over the lazy dog " * 5,
    ]
