from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, model_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "Fishing Poles Dashboard API"
    ENV: str = Field(default="lab", validation_alias=AliasChoices("FISHPOLES_ENV", "ENV"))  # lab|prod
    DATABASE_URL: str = Field(default="sqlite:///./lab.db", validation_alias=AliasChoices("FISHPOLES_DATABASE_URL", "DATABASE_URL"))
    # lista separada por vírgula, "*" libera tudo
    CORS_ORIGINS: str = Field(default="*", validation_alias=AliasChoices("FISHPOLES_CORS_ORIGINS", "CORS_ORIGINS"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("FISHPOLES_LOG_LEVEL", "LOG_LEVEL"))
    # create_all() no startup; em prod o schema vem do alembic
    AUTO_CREATE_SCHEMA: bool = Field(default=True, validation_alias=AliasChoices("FISHPOLES_AUTO_CREATE_SCHEMA", "AUTO_CREATE_SCHEMA"))
    BUILD_SHA: str = Field(default="", validation_alias=AliasChoices("FISHPOLES_BUILD_SHA", "BUILD_SHA", "GITHUB_SHA"))

    @model_validator(mode="after")
    def _deploy_invariants(self):
        self.ENV = (self.ENV or "lab").strip().lower()
        if self.ENV not in ("lab", "prod"):
            raise ValueError(f"ENV inválido: {self.ENV!r} (use: lab | prod)")

        self.LOG_LEVEL = (self.LOG_LEVEL or "INFO").strip().upper()

        if self.ENV == "prod" and self.AUTO_CREATE_SCHEMA and self.DATABASE_URL.startswith("sqlite"):
            raise ValueError("ENV=prod com sqlite + AUTO_CREATE_SCHEMA=true (use alembic upgrade head)")

        return self

    @property
    def cors_origins(self) -> list[str]:
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw:
            return []
        return [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
