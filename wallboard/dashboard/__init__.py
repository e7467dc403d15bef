# Dashboard
# Aggregate views over the agent registry

from wallboard.dashboard.stats import (
    DashboardStats,
    StatusBreakdown,
    StatusBucket,
    compute_dashboard_stats,
    percent_of,
)

__all__ = [
    "DashboardStats",
    "StatusBreakdown",
    "StatusBucket",
    "compute_dashboard_stats",
    "percent_of",
]
