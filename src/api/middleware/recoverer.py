"""
Panic recovery middleware.

Catches exceptions escaping the wrapped ASGI app and answers with an
RFC 7807 Problem Details body (status 500) instead of letting the server
drop the connection. The fault is handed to a logging sink afterwards.
"""

import logging
import traceback
from dataclasses import dataclass
from http import HTTPStatus

from starlette import status
from starlette.applications import Starlette
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from src.api.middleware.faults import is_abort_sentinel, normalize_fault
from src.api.middleware.sinks import LogFunc, log_panic
from src.core.errors import RecovererError
from src.domains.problems.schemas import (
    INTERNAL_SERVER_ERROR_TYPE,
    ProblemDetails,
    ResponseFormat,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecovererConfig:
    """
    Settings of one RecovererMiddleware instance.

    log_func: custom sink called with (error, stack). Defaults to `log_panic`.
    log_all_stack: capture the traceback of the fault. Defaults to True.
    response_format: serialization of the body. Defaults to JSON.
    problem_details_type: `type` member of the body. Defaults to the RFC
        reference of the Internal Server Error status.
    """

    log_func: LogFunc | None = None
    log_all_stack: bool = True
    response_format: ResponseFormat = ResponseFormat.JSON
    problem_details_type: str = INTERNAL_SERVER_ERROR_TYPE

    def __post_init__(self):
        try:
            response_format = ResponseFormat(self.response_format)
        except ValueError as e:
            raise RecovererError(
                f"Unsupported response format: {self.response_format!r}"
            ) from e
        object.__setattr__(self, "response_format", response_format)


DEFAULT_RECOVERER_CONFIG = RecovererConfig()


class RecovererMiddleware:
    """
    Usage:
        app.add_middleware(RecovererMiddleware)
        app.add_middleware(RecovererMiddleware, config=RecovererConfig(...))
    """

    def __init__(self, app: ASGIApp, config: RecovererConfig | None = None) -> None:
        self.app = app
        self.config = config or DEFAULT_RECOVERER_CONFIG

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            error = normalize_fault(exc)

            # The connection is gone: let the server see the exact same error.
            if is_abort_sentinel(error):
                raise

            if response_started:
                logger.warning(
                    f"Response already started for {scope.get('method')} {scope.get('path')}, "
                    "problem details not sent"
                )
            else:
                response = self.problem_response()
                await response(scope, receive, send)

            stack = "".join(traceback.format_exception(exc)) if self.config.log_all_stack else ""
            log_func = self.config.log_func or log_panic
            log_func(error, stack)

    def problem_response(self) -> Response:
        """Fresh 500 response carrying the configured Problem Details body."""
        response_format = self.config.response_format
        problem = ProblemDetails.new(
            self.config.problem_details_type,
            HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "",
            "",
        )
        return Response(
            content=problem.render(response_format),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            media_type=response_format.content_type,
        )


def install_recoverer(app: Starlette, config: RecovererConfig | None = None) -> Starlette:
    """Register RecovererMiddleware on a Starlette / FastAPI app."""
    app.add_middleware(RecovererMiddleware, config=config)
    return app
