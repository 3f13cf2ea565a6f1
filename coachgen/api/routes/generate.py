"""
Content generation endpoint.

Sandi Metz Principles:
- Single Responsibility: HTTP request handling
- Small functions: Minimal logic in endpoints
- Dependency Injection: Client injected
"""

from fastapi import APIRouter, Depends, HTTPException

from coachgen.api.deps import get_generation_client
from coachgen.exceptions import GenerationError, NetworkError, RateLimitError, ServerError
from coachgen.models.response import GenerateRequest, GenerateResponse
from coachgen.services.generation_client import GenerationClient
from coachgen.utils.logger import log_error

router = APIRouter()


def status_for(error: GenerationError) -> int:
    """
    Map a generation error to an HTTP status.

    Args:
        error: Generation error

    Returns:
        429 for rate limiting, 503 for transient upstream failures,
        502 for everything else
    """
    if isinstance(error, RateLimitError):
        return 429
    if isinstance(error, (ServerError, NetworkError)):
        return 503
    return 502


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    client: GenerationClient = Depends(get_generation_client),  # noqa: B008
) -> GenerateResponse:
    """
    Generate structured training content.

    Args:
        request: Generation request
        client: Generation client (injected)

    Returns:
        Parsed document and its source

    Raises:
        HTTPException: If generation fails
    """
    try:
        result = await client.generate_with_source(request.prompt)
    except GenerationError as e:
        log_error(e, "generate", retryable=e.retryable)
        raise HTTPException(status_code=status_for(e), detail=e.message)

    return GenerateResponse(
        document=result.document, source=result.source, offline=result.offline
    )
