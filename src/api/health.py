from fastapi import APIRouter, Request, Response, status
from src.infra.monitoring import check_middleware_stack
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health/live")
async def health_live():
    """
    K8s liveness probe. Returns 200 if the app is running.
    """
    return {"status": "ok"}


@router.get("/health/ready")
async def health_ready(request: Request, response: Response):
    """
    K8s readiness probe. Checks that panic recovery is wired into the app.
    Returns 503 if it is missing.
    """
    stack_status = check_middleware_stack(request.app)

    status_dict = {}
    all_healthy = True

    for comp, result in stack_status.items():
        if result is True:
            status_dict[comp] = "ok"
        else:
            status_dict[comp] = "error"
            all_healthy = False

    if not all_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return status_dict
