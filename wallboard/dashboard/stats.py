"""
Dashboard Statistics

Aggregates the registry snapshot into per-status counts and percentages
for the wallboard header.

Agents whose status is not one of the AgentStatus values (legacy seed
data such as "Busy") are counted in the total but in no bucket.
"""

import math
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from wallboard.clock import utc_now_iso
from wallboard.registry.agent import AgentRecord, AgentStatus


class StatusBucket(BaseModel):
    """Count and rounded share of agents in one status."""
    count: int = Field(default=0, ge=0)
    percent: int = Field(default=0, ge=0, le=100)


class StatusBreakdown(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    available: StatusBucket
    active: StatusBucket
    wrap_up: StatusBucket = Field(..., alias="wrapUp")
    not_ready: StatusBucket = Field(..., alias="notReady")
    offline: StatusBucket


class DashboardStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    status_breakdown: StatusBreakdown = Field(..., alias="statusBreakdown")
    timestamp: str = Field(default_factory=utc_now_iso)


def percent_of(count: int, total: int) -> int:
    """
    Percentage of total, rounded half up to an integer.

    Returns 0 when total is 0.
    """
    if total <= 0:
        return 0
    return math.floor(count / total * 100 + 0.5)


def compute_dashboard_stats(agents: Sequence[AgentRecord]) -> DashboardStats:
    """
    Build dashboard statistics for a list of agents.

    Args:
        agents: Snapshot of the registry

    Returns:
        DashboardStats with one bucket per AgentStatus
    """
    total = len(agents)

    def bucket(status: AgentStatus) -> StatusBucket:
        count = sum(1 for a in agents if a.status == status.value)
        return StatusBucket(count=count, percent=percent_of(count, total))

    return DashboardStats(
        total=total,
        status_breakdown=StatusBreakdown(
            available=bucket(AgentStatus.AVAILABLE),
            active=bucket(AgentStatus.ACTIVE),
            wrap_up=bucket(AgentStatus.WRAP_UP),
            not_ready=bucket(AgentStatus.NOT_READY),
            offline=bucket(AgentStatus.OFFLINE),
        ),
    )
