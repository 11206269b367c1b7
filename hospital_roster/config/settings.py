"""Global project configuration values."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SQLite file in the working directory unless overridden
    database_url: str = "sqlite:///hospital.db"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Seed admin account; the password is stored as an md5 hex digest ("admin123")
    admin_username: str = "admin"
    admin_password_hash: str = "0192023a7bbd73250516f069df18b500"

    # Seed hospital info
    hospital_name: str = "城东医院"
    hospital_introduction: str = "欢迎来到城东医院。我院成立于1997年，是一所综合性三级甲等医院。"
    hospital_address: str = "城市中心区xx路666号"
    hospital_phone: str = "025-12345678"
    hospital_emergency_phone: str = "025-12345679"

    # Seed check retry (seconds between attempts; 0 attempts = keep retrying)
    seed_retry_delay: float = 1.0
    seed_max_attempts: int = 0


settings = Settings()
