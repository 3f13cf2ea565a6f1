"""
Health check endpoints.

Sandi Metz Principles:
- Single Responsibility: Health check logic only
- Small functions: Each check isolated
- Clear naming: Descriptive endpoint names
"""

from fastapi import APIRouter, Depends

from coachgen import __version__
from coachgen.api.deps import get_generation_client
from coachgen.config import config
from coachgen.models.response import HealthResponse
from coachgen.services.generation_client import GenerationClient
from coachgen.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(
    client: GenerationClient = Depends(get_generation_client),  # noqa: B008
) -> HealthResponse:
    """
    Health check endpoint.

    Reports degraded when offline or without an API key, since requests
    are then answered from offline templates.

    Returns:
        Health status response
    """
    online = not client.is_offline
    status = "healthy" if online and client.has_provider else "degraded"
    return HealthResponse(
        status=status,
        environment=config.app_env,
        version=__version__,
        connectivity=client.connectivity,
        online=online,
        provider_configured=client.has_provider,
        cache=client.cache.stats,
    )


@router.get("/live")
async def liveness_check() -> dict:
    """
    Liveness probe endpoint.

    Always returns alive if the application is running.
    """
    return {"status": "alive"}
