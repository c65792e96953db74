import logging

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"

    # Deployment credentials (Env Vars - Required to start app)
    CLIENT_ID: str
    CLIENT_SECRET: str

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    DEFAULT_VALIDITY_MINUTES: int = Field(30, gt=0)

    class Config:
        env_file = ".env"


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors())
        logger.critical(
            f"Invalid or missing configuration: {missing}. "
            f"Set CLIENT_ID and CLIENT_SECRET in the environment or a .env file."
        )
        raise SystemExit(1) from e


settings = load_settings()
