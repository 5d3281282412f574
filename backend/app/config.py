import os
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = Field("OneMatch Backend", alias="ONEMATCH_APP_NAME")
    eid_prefix: str = Field("E", alias="ONEMATCH_EID_PREFIX", min_length=1, max_length=1)
    eid_max_attempts: int = Field(1000, alias="ONEMATCH_EID_MAX_ATTEMPTS", ge=1)
    seed_demo_data: bool = Field(True, alias="ONEMATCH_SEED_DEMO_DATA")
    user_header: str = Field("X-User-Id", alias="ONEMATCH_USER_HEADER")
    user_cookie: str = Field("onematch_user", alias="ONEMATCH_USER_COOKIE")
    onboarding_cookie: str = Field("onematch_onboarded", alias="ONEMATCH_ONBOARDING_COOKIE")
    cookie_max_age: int = Field(60 * 60 * 24 * 365, alias="ONEMATCH_COOKIE_MAX_AGE", ge=0)
    cors_origins: str = Field("*", alias="ONEMATCH_CORS_ORIGINS")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid backend configuration: {exc}") from exc
