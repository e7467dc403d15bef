from __future__ import annotations

import pytest

from wallboard.dashboard import compute_dashboard_stats, percent_of
from wallboard.registry import AgentRecord, seed_agents

BUCKETS = ["available", "active", "wrapUp", "notReady", "offline"]


def _agents(*statuses: str) -> list[AgentRecord]:
    return [AgentRecord(code=f"T{i}", name=f"T{i}", status=s) for i, s in enumerate(statuses)]


@pytest.mark.parametrize(
    "count,total,expected",
    [
        (0, 0, 0),
        (3, 0, 0),
        (1, 3, 33),
        (2, 3, 67),
        (1, 8, 13),
        (1, 2, 50),
        (4, 4, 100),
    ],
)
def test_percent_of(count, total, expected):
    assert percent_of(count, total) == expected


def test_empty_collection_has_zero_percentages():
    data = compute_dashboard_stats([]).model_dump(by_alias=True)

    assert data["total"] == 0
    for key in BUCKETS:
        assert data["statusBreakdown"][key] == {"count": 0, "percent": 0}


def test_counts_sum_to_total_for_enumerated_statuses():
    agents = _agents("Available", "Active", "Active", "Wrap Up", "Not Ready", "Offline", "Offline", "Offline")
    data = compute_dashboard_stats(agents).model_dump(by_alias=True)
    breakdown = data["statusBreakdown"]

    assert data["total"] == 8
    assert sum(breakdown[k]["count"] for k in BUCKETS) == 8
    assert breakdown["active"] == {"count": 2, "percent": 25}
    assert breakdown["offline"] == {"count": 3, "percent": 38}
    assert breakdown["wrapUp"] == {"count": 1, "percent": 13}
    for key in BUCKETS:
        assert breakdown[key]["percent"] == percent_of(breakdown[key]["count"], 8)


def test_seed_busy_agent_is_uncategorised():
    data = compute_dashboard_stats(seed_agents()).model_dump(by_alias=True)
    breakdown = data["statusBreakdown"]

    assert data["total"] == 3
    assert breakdown["available"] == {"count": 1, "percent": 33}
    assert breakdown["offline"] == {"count": 1, "percent": 33}
    assert sum(breakdown[k]["count"] for k in BUCKETS) == 2


def test_stats_carry_timestamp():
    data = compute_dashboard_stats([]).model_dump(by_alias=True)
    assert data["timestamp"].endswith("Z")
