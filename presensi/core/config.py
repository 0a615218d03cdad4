# presensi/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    SECRET_KEY: str = "your-super-secret-jwt-key-change-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 10080  # 7 days

    DATABASE_URL: str = "sqlite:///./presensi.db"

    # Vision model used for face comparison (OpenAI-compatible chat endpoint)
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_API_KEY: Optional[str] = None
    AI_MODEL: str = "google/gemini-2.5-flash"
    AI_CONNECT_TIMEOUT: float = 10.0
    AI_READ_TIMEOUT: float = 45.0

    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"

# Created once
settings = Settings()
