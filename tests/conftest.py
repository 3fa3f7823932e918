"""Shared fixtures for StatCoach tests."""

import pytest

from statcoach.analysis.models import RawStats


@pytest.fixture
def sample_payload():
    """Box score from a strong three-set match, in wire shape."""
    return {
        "totalKills": 50,
        "killAttempts": 100,
        "attackErrors": 10,
        "serviceAces": 8,
        "serviceErrors": 12,
        "receptionErrors": 2,
        "digs": 35,
        "soloBlocks": 3,
        "blockAssists": 15,
        "totalSets": 3,
    }


@pytest.fixture
def sample_stats(sample_payload):
    """The sample box score as RawStats."""
    return RawStats.from_dict(sample_payload)
