from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domains.problems.schemas import INTERNAL_SERVER_ERROR_TYPE, ResponseFormat


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Problem Details Recoverer"

    LOG_LEVEL: str = "INFO"

    # Recovery middleware used by the demo service
    RECOVERER_LOG_ALL_STACK: bool = True
    RECOVERER_RESPONSE_FORMAT: ResponseFormat = ResponseFormat.JSON
    RECOVERER_PROBLEM_TYPE: str = INTERNAL_SERVER_ERROR_TYPE


settings = Settings()
