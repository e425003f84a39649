"""Application settings configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from design_tracker.infrastructure.mongo import ConnectionMode


class Settings(BaseSettings):
    """Application settings, read from the environment and ``.env``.

    ``mongodb_uri`` has no default: constructing settings without
    ``MONGODB_URI`` fails immediately.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Debugging Configuration
    debug: bool = False
    log_level: str = "INFO"

    # Application Configuration
    app_name: str = "Design Tracker"
    app_version: str = "1.0.0"
    app_host: str = "127.0.0.1"  # Uvicorn bind address
    app_port: int = 8080

    # Persistence Configuration
    mongodb_uri: str
    database_name: str = "design_tracker"
    connection_mode: ConnectionMode = ConnectionMode.PERSISTENT

    # CORS Configuration
    enable_cors: bool = True
    cors_origins: list[str] = ["http://localhost:3000"]
