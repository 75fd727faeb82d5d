from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Terminology service API
    ocl_api_url: str = Field(default="https://api.openconceptlab.org")
    request_timeout: float = Field(default=30.0, gt=0)
    request_retries: int = Field(default=3, ge=1)
    mappings_limit: int = Field(default=0, ge=0)  # 0 = no limit

    # Dependency resolution
    levels_to_check: int = Field(default=20, ge=0)

    # Offline mappings (JSON file keyed by source URL)
    mappings_file: Path | None = Field(default=None)

    @model_validator(mode="after")
    def _validate_api_url(self) -> "Settings":
        if not self.mappings_file and not self.ocl_api_url:
            raise ValueError(
                "OCL_API_URL is required when no MAPPINGS_FILE is configured. "
                "Set MAPPINGS_FILE to resolve dependencies offline instead."
            )
        self.ocl_api_url = self.ocl_api_url.rstrip("/")
        return self
