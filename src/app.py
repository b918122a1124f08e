"""PizzaPie FastAPI application.

Web server for the pizza shop dashboard. Commands are processed
synchronously within each request; every request runs inside the
pizzapie domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import os
import uuid

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from pyproject.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pizzapie.domain import pizzapie
from pizzapie.utils.logging import add_context, clear_context
from shared.health import health_router
from shared.http import register_exception_handlers, response_time_middleware

pizzapie.init()


def _cors_origins() -> list[str]:
    raw = os.getenv("PIZZAPIE_CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="PizzaPie API",
    description="Pizza orders, the kitchen and delivery drivers",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.middleware("http")(response_time_middleware)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the pizzapie domain context and bind request details to the log context."""
    clear_context()
    add_context(
        request_id=request.headers.get("X-Request-ID", str(uuid.uuid4())),
        method=request.method,
        path=request.url.path,
    )
    with pizzapie.domain_context():
        response = await call_next(request)
    return response


register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from pizzapie import health  # noqa: E402,F401  registers health check resources
from pizzapie.api import driver_router, kitchen_router, menu_router, order_router  # noqa: E402

app.include_router(order_router)
app.include_router(kitchen_router)
app.include_router(driver_router)
app.include_router(menu_router)
app.include_router(health_router)
