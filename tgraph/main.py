# tgraph/main.py
"""
Temporal Graph Engine - HTTP application

Serves one in-memory temporal graph: build it (nodes, edges, samples,
random graphs, edge lists, JSON snapshots), then run traversal, path
and aggregate queries against it at a chosen time.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from . import __version__
from .api import graph_router
from .logging import configure_logging, get_logger
from .settings import settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown."""
    configure_logging()
    logger.info("app_starting", version=__version__, max_nodes=settings.max_nodes)

    yield

    logger.info("app_stopping")


app = FastAPI(
    title="Temporal Graph Engine",
    description="""
    Reachability, shortest-path, centrality and connectivity queries over
    graphs whose edges are only active at specific times.

    Two edge activation models:
    - Discrete-event edges: active at explicit timestamps (string nodes)
    - Interval edges: active over [start, end] with a weight (nodes 1..n)
    """,
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add basic security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Server"] = "Temporal Graph Engine"
        return response


app.add_middleware(SecurityHeadersMiddleware)

app.include_router(graph_router)


@app.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok", "service": "temporal-graph-engine"}


def run():
    """Run the server (entry point for CLI)."""
    import uvicorn
    uvicorn.run(
        "tgraph.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
