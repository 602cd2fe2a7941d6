from starlette.applications import Starlette
from src.api.middleware.recoverer import RecovererMiddleware
import logging

logger = logging.getLogger(__name__)


def check_middleware_stack(app: Starlette) -> dict[str, bool | str]:
    """
    Checks that the safety middleware is registered on the app.
    Returns a dict mapping component name to status (True for OK, error string for failure).
    """
    status = {}

    installed = [m.cls for m in app.user_middleware]

    if RecovererMiddleware in installed:
        status["recoverer"] = True
    else:
        logger.error("Health check failed (recoverer): middleware not installed")
        status["recoverer"] = "RecovererMiddleware is not installed"

    return status
