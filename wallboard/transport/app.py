"""
Agent Wallboard Application

FastAPI application exposing the agent registry over HTTP.
This is the main entry point for running the wallboard.

Settings are read from the environment (see wallboard.config).
Every response carries a ``success`` flag; failures add a human-readable
``message`` and use the HTTP status of the raised WallboardError.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from wallboard.clock import utc_now_iso
from wallboard.config import ServiceSettings, settings_from_env
from wallboard.dashboard import compute_dashboard_stats
from wallboard.registry import AgentRegistry, WallboardError, seed_agents

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class StatusUpdateRequest(BaseModel):
    """Body of PATCH /api/agents/{code}/status."""
    # Any JSON value; non-members of AgentStatus are rejected by the registry
    status: Any = None


class LoginRequest(BaseModel):
    """Body of POST /api/agents/{code}/login."""
    name: str | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown of the wallboard."""
    registry: AgentRegistry = app.state.registry
    logger.info(f"Starting Agent Wallboard ({registry.agent_count} agents loaded)")

    yield

    logger.info("Agent Wallboard stopped")


def get_registry(request: Request) -> AgentRegistry:
    return request.app.state.registry


async def wallboard_error_handler(request: Request, exc: WallboardError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report body/parameter validation failures as 400 with the wallboard envelope."""
    problems = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        problems.append(f"{field}: {error.get('msg')}" if field else str(error.get("msg")))

    message = "Invalid request: " + "; ".join(problems)
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message},
    )


def create_app(
    settings: ServiceSettings | None = None,
    registry: AgentRegistry | None = None,
) -> FastAPI:
    """
    Build the wallboard application.

    Args:
        settings: Service settings (read from the environment if omitted)
        registry: Registry to serve (seeded per settings if omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or settings_from_env()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
    )

    if registry is None:
        registry = AgentRegistry(seed_agents() if settings.seed else None)

    app = FastAPI(
        title="Agent Wallboard",
        description="In-memory call-center agent status service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.settings = settings

    # Defaults to "*": any origin may call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(WallboardError, wallboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello Agent Wallboard!"

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "OK", "timestamp": utc_now_iso()}

    @app.get("/api/agents")
    async def list_agents(registry: AgentRegistry = Depends(get_registry)):
        agents = await registry.list_agents()
        return {
            "success": True,
            "data": [a.to_public_dict() for a in agents],
            "count": len(agents),
            "timestamp": utc_now_iso(),
        }

    @app.get("/api/agents/count")
    async def count_agents(registry: AgentRegistry = Depends(get_registry)):
        return {
            "success": True,
            "count": registry.agent_count,
            "timestamp": utc_now_iso(),
        }

    @app.patch("/api/agents/{code}/status")
    async def update_agent_status(
        code: str,
        body: StatusUpdateRequest | None = None,
        registry: AgentRegistry = Depends(get_registry),
    ):
        agent = await registry.update_status(code, body.status if body else None)
        return {
            "success": True,
            "message": f"Status updated for agent {code}",
            "data": agent.to_public_dict(),
            "timestamp": utc_now_iso(),
        }

    @app.get("/api/dashboard/stats")
    async def dashboard_stats(registry: AgentRegistry = Depends(get_registry)):
        stats = compute_dashboard_stats(await registry.snapshot())
        return {
            "success": True,
            "data": stats.model_dump(by_alias=True),
        }

    @app.post("/api/agents/{code}/login")
    async def login_agent(
        code: str,
        body: LoginRequest | None = None,
        registry: AgentRegistry = Depends(get_registry),
    ):
        agent, now = await registry.login(code, body.name if body else None)
        return {
            "success": True,
            "message": f"Agent {code} logged in",
            "data": agent.to_public_dict(),
            "timestamp": now,
        }

    @app.post("/api/agents/{code}/logout")
    async def logout_agent(code: str, registry: AgentRegistry = Depends(get_registry)):
        agent = await registry.logout(code)
        return {
            "success": True,
            "message": f"Agent {code} logged out",
            "data": agent.to_public_dict(),
            "timestamp": utc_now_iso(),
        }

    return app


app = create_app()
