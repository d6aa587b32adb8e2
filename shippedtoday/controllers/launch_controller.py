import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..core.constants import LAUNCHES_PATH
from ..core.dependencies import get_client_id, get_launch_service
from ..core.exceptions import StorageError
from ..models.schemas import ErrorResponse, Launch, LaunchListResponse
from ..services.launch_service import LaunchService

logger = logging.getLogger(__name__)

router = APIRouter()

_error_responses = {
    400: {"model": ErrorResponse, "description": "Invalid or spammy submission"},
    403: {"model": ErrorResponse, "description": "Cross-origin request"},
    409: {"model": ErrorResponse, "description": "Duplicate of a recent submission"},
    429: {"model": ErrorResponse, "description": "Cooldown or rate limit active"},
    500: {"model": ErrorResponse, "description": "Storage failure"},
    507: {"model": ErrorResponse, "description": "Launch limit reached"},
}


@router.get(
    LAUNCHES_PATH,
    response_model=LaunchListResponse,
    summary="List launches",
    tags=["Launches"],
    responses={500: _error_responses[500]},
)
async def list_launches(service: LaunchService = Depends(get_launch_service)):
    """All launches, newest first"""
    try:
        return await service.list_launches()
    except StorageError as e:
        logger.error(f"Failed to read launches: {e}")
        raise StorageError("Failed to fetch launches")


@router.post(
    LAUNCHES_PATH,
    response_model=Launch,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a launch",
    tags=["Launches"],
    responses=_error_responses,
)
async def submit_launch(
    request: Request,
    client_id: str = Depends(get_client_id),
    service: LaunchService = Depends(get_launch_service),
):
    """
    Submit a new launch

    - Rejected during the global cooldown and when the client exceeds its rate limit
    - Body must be JSON: ``{tweetUrl?, title, url, description, tags[]}``
    - Spam, recent duplicates and script URLs are rejected
    """
    body = await request.body()
    return await service.submit_launch(
        body, client_id=client_id, content_type=request.headers.get("content-type")
    )


@router.api_route(
    LAUNCHES_PATH,
    methods=["PUT", "DELETE", "PATCH"],
    include_in_schema=False,
)
async def launches_method_not_allowed():
    """Launches are immutable"""
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method not allowed",
        headers={"Allow": "GET, POST"},
    )
