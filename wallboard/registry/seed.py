"""Agents present when the service starts."""

from wallboard.registry.agent import AgentRecord


def seed_agents() -> list[AgentRecord]:
    """Return fresh copies of the seed records."""
    return [
        AgentRecord(
            code="A001",
            name="Kittaphon LA",
            status="Available",
            department="QA",
            login_time="2025-09-17T07:30:00Z",
        ),
        AgentRecord(
            code="A002",
            name="Worawit SW",
            status="Busy",
            department="DEV",
            login_time="2025-09-17T08:00:00Z",
        ),
        AgentRecord(
            code="A003",
            name="Nattakit K",
            status="Offline",
            department="DEV",
            login_time=None,
        ),
    ]
