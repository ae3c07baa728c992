"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "fraudnet-intelligence"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # Institution identifier stamped on records derived from local verdicts
    bank_id: str = "default-bank"

    # Durable record store (S3, or MinIO in development)
    s3_endpoint_url: str | None = None
    s3_region: str = "us-east-1"
    s3_bucket_name: str = "fraud-detection-service-data"
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None

    ledger_load_on_startup: bool = True

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
