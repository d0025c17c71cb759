from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Storage
    storage_backend: str = Field("s3", description="Object store backend: 's3' or 'gcs'.")
    bucket_name: str = Field("s3.images.story.io", description="Bucket holding the original images.")
    aws_region: Optional[str] = Field(default=None, description="AWS region for the S3 backend.")
    gcp_project_id: Optional[str] = Field(default=None, description="GCP project ID for the GCS backend.")

    # Request validation
    allowed_hosts: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["images.story.io"],
        description="Hosts whose objects may be served (first path segment).",
    )

    # Image encoding
    jpeg_quality: int = Field(95, ge=1, le=95, description="JPEG quality for encoded responses.")

    # Logging
    log_level: str = Field("INFO")

    @field_validator("allowed_hosts", mode="before")
    @classmethod
    def _split_hosts(cls, value):
        # Accept a JSON list or a comma-separated string
        if isinstance(value, str):
            value = value.strip()
            if value.startswith("["):
                value = json.loads(value)
            else:
                value = value.split(",")
        return [host.strip() for host in value if host and host.strip()]


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
