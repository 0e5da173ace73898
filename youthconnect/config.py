from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./youthconnect.db"

    # Email
    email_mode: str = "dev"  # dev | prod
    sendgrid_api_key: str = ""

    # Auth
    secret_key: str = "change-me-to-a-long-random-session-secret"
    session_max_age_days: int = 30

    # Resume storage
    storage_backend: str = "local"  # local | supabase
    resume_dir: Path = Path("/data/resumes")
    resume_max_size_mb: int = 5
    storage_url: str = ""  # e.g. https://<project>.supabase.co/storage/v1
    storage_bucket: str = "resumes"
    storage_api_key: str = ""

    # App
    debug: bool = False
    frontend_url: str = "http://localhost:5173"
    allowed_origins: str = ""

    def get_frontend_url(self) -> str:
        """Frontend base URL without a trailing slash."""
        return self.frontend_url.rstrip("/")


settings = Settings()
