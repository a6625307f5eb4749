from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Precision used when a caller does not supply one (5 = Google, 6 = OSRM/Valhalla)
    default_precision: int = Field(default=5, alias="POLYLINE_DEFAULT_PRECISION")

    # 10**precision has to fit an unsigned 32-bit scale factor
    max_precision: int = Field(default=9, alias="POLYLINE_MAX_PRECISION")


settings = Settings()
