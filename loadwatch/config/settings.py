from os import getenv
from typing import Literal, TypeGuard, get_args

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv("")

_ENVS = Literal["development", "testing", "staging", "production"]


def _is_valid_env(env: str | None) -> TypeGuard[_ENVS]:
    return env in get_args(_ENVS)


_ENV = getenv("DEPLOYMENT_ENV")
_DEPLOYMENT_ENV = _ENV if _is_valid_env(_ENV) else "development"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # `.env.local` takes priority over `.env`
        env_file=(".env", f".env.{_DEPLOYMENT_ENV}", ".env.local"),
        extra="ignore",
    )

    APP_NAME: str = "loadwatch"
    DEPLOYMENT_ENV: _ENVS = _DEPLOYMENT_ENV

    METRICS_SINK: Literal["aws", "stdout"] = "aws"
    # CloudWatch accepts at most 20 datums per put_metric_data call
    METRICS_MAX_BATCH_SIZE: int = 20
    METRICS_AWS_ENDPOINT_URL: str | None = None


settings = Settings()
