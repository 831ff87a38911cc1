# src/emp_crud/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",            # auto-load .env (optional; process env wins)
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./emp.db"
    DB_ECHO: bool = False              # logs all SQL when True
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_TIMEOUT: int = 30               # seconds

    # Time / logging
    TIMEZONE: str = "Asia/Shanghai"
    LOG_LEVEL: str = "INFO"

    # Server (run.py)
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000

settings = Settings()
