"""
Agent Registry

In-memory registry tracking every call-center agent the wallboard knows
about. Provides lookup by agent code plus the login/logout/status
operations exposed over HTTP.

Why in-memory?
- The wallboard is a live view; state resets on restart
- Low latency for dashboard refreshes
"""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from wallboard.clock import utc_now_iso
from wallboard.registry.agent import AgentRecord, AgentStatus
from wallboard.registry.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class AgentRegistry:
    """
    Owns the agent records and every mutation applied to them.

    Records are kept in insertion order, which is also the listing and
    reporting order. Safe for concurrent async handlers via asyncio lock.
    """

    def __init__(self, agents: Iterable[AgentRecord] | None = None):
        """
        Initialize the registry.

        Args:
            agents: Initial records, e.g. the startup seed
        """
        # code -> AgentRecord (dicts preserve insertion order)
        self._agents: dict[str, AgentRecord] = {}
        for agent in agents or []:
            self._agents[agent.code] = agent

        self._lock = asyncio.Lock()

    async def list_agents(self) -> list[AgentRecord]:
        """List all agents in insertion order."""
        async with self._lock:
            return list(self._agents.values())

    async def snapshot(self) -> list[AgentRecord]:
        """Return detached copies of all agents, for aggregation."""
        async with self._lock:
            return [a.model_copy() for a in self._agents.values()]

    async def get_agent(self, code: str) -> AgentRecord | None:
        """Get agent by code."""
        async with self._lock:
            return self._agents.get(code)

    async def update_status(self, code: str, status: Any) -> AgentRecord:
        """
        Move an agent to a new status.

        Any status may follow any other; only membership in AgentStatus
        is enforced.

        Args:
            code: Agent code
            status: Requested status value, as decoded from the request body

        Returns:
            The updated AgentRecord

        Raises:
            ValidationError: status missing or not a known status
            NotFoundError: no agent with this code
        """
        if not status:
            raise ValidationError("Missing 'status' in request body")

        async with self._lock:
            agent = self._agents.get(code)
            if agent is None:
                raise NotFoundError(f"Agent with code {code} not found")

            valid = AgentStatus.values()
            if status not in valid:
                raise ValidationError(
                    f"Invalid status '{status}'. Valid statuses: {', '.join(valid)}"
                )

            old_status = agent.status
            agent.status = status

            logger.info(f"Agent {code}: {old_status} → {status}")
            return agent

    async def login(self, code: str, name: str | None) -> tuple[AgentRecord, str]:
        """
        Log an agent in, creating the record if the code is unknown.

        New agents get department "Unknown". Existing agents keep their
        department; name, status and login time are overwritten.

        Args:
            code: Agent code
            name: Display name sent by the client

        Returns:
            Tuple of (AgentRecord, login timestamp)

        Raises:
            ValidationError: name missing
        """
        if not name:
            raise ValidationError("Missing 'name' in request body")

        async with self._lock:
            now = utc_now_iso()
            agent = self._agents.get(code)

            if agent is None:
                agent = AgentRecord(
                    code=code,
                    name=name,
                    status=AgentStatus.AVAILABLE.value,
                    department="Unknown",
                    login_time=now,
                )
                self._agents[code] = agent
                logger.info(f"Agent {code} logged in (new record, name: {name})")
            else:
                agent.name = name
                agent.status = AgentStatus.AVAILABLE.value
                agent.login_time = now
                logger.info(f"Agent {code} logged in")

            return agent, now

    async def logout(self, code: str) -> AgentRecord:
        """
        Log an agent out: status becomes Offline and login time is cleared.

        Raises:
            NotFoundError: no agent with this code
        """
        async with self._lock:
            agent = self._agents.get(code)
            if agent is None:
                raise NotFoundError(f"Agent with code {code} not found")

            agent.status = AgentStatus.OFFLINE.value
            agent.login_time = None

            logger.info(f"Agent {code} logged out")
            return agent

    @property
    def agent_count(self) -> int:
        """Number of registered agents."""
        return len(self._agents)
