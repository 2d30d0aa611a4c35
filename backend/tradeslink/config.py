from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_path: Path = Path.home() / "TradesLink"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # Credit prices
    job_post_cost: int = 30
    unlock_cost: int = 10
    # Unlock records fall back to this when the contractor's address does not resolve
    default_country_code: str = "pl"
    # Jobs posted with an unknown country keep this code
    default_job_country_code: str = "DE"

    session_ttl_seconds: int = 12 * 60 * 60
    request_timeout_seconds: float = 10.0
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB

    seed_demo_data: bool = False
    demo_password: str = "demo-password"

    cors_origins: str = "http://127.0.0.1:5173,http://localhost:5173"

    @property
    def db_path(self) -> Path:
        return self.data_path / "db.sqlite"

    @property
    def media_dir(self) -> Path:
        return self.data_path / "media"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    model_config = {"env_prefix": "TRADESLINK_"}


settings = Settings()
