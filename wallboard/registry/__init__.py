# Agent Registry
# Holds agent records: login/logout, status changes, lookup by code

from wallboard.registry.agent import AgentRecord, AgentStatus
from wallboard.registry.errors import NotFoundError, ValidationError, WallboardError
from wallboard.registry.registry import AgentRegistry
from wallboard.registry.seed import seed_agents

__all__ = [
    "AgentRecord",
    "AgentStatus",
    "AgentRegistry",
    "WallboardError",
    "ValidationError",
    "NotFoundError",
    "seed_agents",
]
