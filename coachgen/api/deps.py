"""
API dependency injection.

Sandi Metz Principles:
- Single Responsibility: Dependency lookup for routes
- Dependency Inversion: Routes receive the client, never build it
"""

from fastapi import HTTPException, Request

from coachgen.services.generation_client import GenerationClient


async def get_generation_client(request: Request) -> GenerationClient:
    """
    Get the application's generation client.

    Args:
        request: FastAPI request

    Returns:
        Client created at startup

    Raises:
        HTTPException: If the application has not started
    """
    client = getattr(request.app.state, "generation_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Generation client not ready")
    return client
