from src.api.middleware.recoverer import RecovererConfig
from src.core.config.settings import Settings


def recoverer_config_from_settings(settings: Settings) -> RecovererConfig:
    """
    Build the middleware config from service settings.
    The default sink is kept; custom sinks are code, not configuration.
    """
    return RecovererConfig(
        log_all_stack=settings.RECOVERER_LOG_ALL_STACK,
        response_format=settings.RECOVERER_RESPONSE_FORMAT,
        problem_details_type=settings.RECOVERER_PROBLEM_TYPE,
    )
