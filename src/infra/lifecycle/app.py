from contextlib import asynccontextmanager
from fastapi import FastAPI
from src.core.config.settings import settings
from src.infra.monitoring import check_middleware_stack
import logging

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Starting up {settings.PROJECT_NAME}...")

    stack_status = check_middleware_stack(app)
    failed_components = [k for k, v in stack_status.items() if v is not True]

    if failed_components:
        logger.warning(f"Middleware missing: {failed_components}")
    else:
        config = app.state.recoverer_config
        logger.info(
            f"Panic recovery active (format={config.response_format.value}, "
            f"type={config.problem_details_type}, stack={config.log_all_stack})"
        )

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")
