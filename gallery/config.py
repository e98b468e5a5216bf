from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Handler settings loaded from environment."""

    # Service
    service_name: str = "gallery-posts"
    log_level: str = "INFO"

    # Storage
    posts_ddb: str = "posts"
    gallery_bucket: str = "gallery-storage"

    # Shared write password (empty rejects every write)
    gallery_password: str = ""

    # AWS
    aws_region: str = "sa-east-1"
    aws_endpoint_url: str | None = None  # For LocalStack

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
