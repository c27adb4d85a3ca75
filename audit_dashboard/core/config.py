
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Audit Dashboard API"
    app_env: str = "development"
    app_version: str = "1.0.0"
    app_port: int = 3000
    api_prefix: str = "/api"
    frontend_url: str = "http://localhost:5500"

    # Persistence: "sql" (durable, DATABASE_URL) or "memory" (process lifetime)
    storage_backend: str = Field(
        default="sql", alias="STORAGE_BACKEND", pattern="^(sql|memory)$",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./audit_dashboard.db",
        alias="DATABASE_URL",
    )

    # Uploads
    upload_dir: str = Field(default="./uploads", alias="UPLOAD_DIR")
    max_upload_size_mb: int = 10

    # Access gate
    jwt_secret: str = Field(
        default="change-me-in-production", alias="JWT_SECRET",
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expiry_hours: int = Field(default=24, alias="JWT_EXPIRY_HOURS")

    # Seeded default admin (created at startup when absent)
    admin_email: str = Field(default="admin@2025", alias="ADMIN_EMAIL")
    admin_password: str = Field(default="audit@2025", alias="ADMIN_PASSWORD")

    # Statistics
    recent_window_days: int = Field(default=30, alias="RECENT_WINDOW_DAYS")

    # Per-client-address request limit applied to every route (slowapi syntax)
    rate_limit: str = Field(default="100/15 minutes", alias="RATE_LIMIT")
    rate_limit_enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def uses_memory_store(self) -> bool:
        return self.storage_backend == "memory"

settings = Settings()
