from fastapi import FastAPI
from src.api.router import router as api_router
from src.api.middleware.recoverer import RecovererConfig, install_recoverer
from src.core.config.settings import settings
from src.infra.lifecycle.app import lifespan
from src.infra.lifecycle.dependencies import recoverer_config_from_settings


def create_app(recoverer_config: RecovererConfig | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        description="Recovers from unhandled handler errors with RFC 7807 Problem Details responses.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    config = recoverer_config or recoverer_config_from_settings(settings)
    app.state.recoverer_config = config
    install_recoverer(app, config)

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
