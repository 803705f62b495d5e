from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FAIRRPS_", env_file=".env", extra="ignore")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    TABLE_FORMAT: str = "grid"
    TABLE_LABEL: str = "v User\\PC >"


settings = Settings()
