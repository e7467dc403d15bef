from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from wallboard.config import ServiceSettings
from wallboard.registry import AgentRegistry, seed_agents
from wallboard.transport.app import create_app


@pytest.fixture
def registry() -> AgentRegistry:
    """Fresh registry holding the seed agents."""
    return AgentRegistry(seed_agents())


@pytest.fixture
def client(registry: AgentRegistry) -> TestClient:
    app = create_app(ServiceSettings(), registry=registry)
    return TestClient(app)
