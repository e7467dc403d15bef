# Agent Wallboard
# In-memory REST service tracking call-center agent status

__version__ = "0.1.0"

from wallboard.registry import (
    AgentRecord,
    AgentStatus,
    AgentRegistry,
    NotFoundError,
    ValidationError,
    WallboardError,
)
from wallboard.dashboard import DashboardStats, compute_dashboard_stats

__all__ = [
    "__version__",
    # Registry
    "AgentRecord",
    "AgentStatus",
    "AgentRegistry",
    "WallboardError",
    "ValidationError",
    "NotFoundError",
    # Dashboard
    "DashboardStats",
    "compute_dashboard_stats",
]
