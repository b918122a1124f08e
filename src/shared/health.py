"""Health check endpoints.

``/healthcheck`` answers as long as the process serves requests.
``/healthcheck/resources`` checks every registered resource (storage,
event store, ...) and reports each outcome.
"""

import traceback
from enum import Enum

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)


class HealthCheckStatus(Enum):
    OK = "Ok"
    FAILURE = "Failure"


class HealthCheckResource:
    """A dependency the service needs in order to be useful.

    Subclasses set ``name`` and implement ``ping()``, raising on failure.
    """

    name = "resource"

    def ping(self):
        raise NotImplementedError

    def check_health(self):
        try:
            self.ping()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Health check failed", resource=self.name, error=str(exc))
            return {
                "resource_name": self.name,
                "status": HealthCheckStatus.FAILURE.value,
                "error_stack_trace": "".join(traceback.format_exception(exc)),
            }

        return {
            "resource_name": self.name,
            "status": HealthCheckStatus.OK.value,
            "error_stack_trace": None,
        }


_resources = []


def register_resource(resource):
    _resources.append(resource)
    return resource


def registered_resources():
    return list(_resources)


health_router = APIRouter(prefix="/healthcheck", tags=["health"])


@health_router.get("")
async def ping():
    return "I'M ALIVE"


@health_router.get("/resources")
async def resources():
    results = [resource.check_health() for resource in registered_resources()]
    healthy = all(result["status"] == HealthCheckStatus.OK.value for result in results)
    return JSONResponse(status_code=200 if healthy else 400, content=results)
