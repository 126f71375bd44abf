from typing import Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ENV: str = "local"  # Environment setting
    LOG_LEVEL: str = "INFO"

    # Google OAuth settings
    GOOGLE_CLIENT_ID: str
    GOOGLE_CLIENT_SECRET: str
    # Public origin used for the OAuth callback; falls back to the request origin
    PUBLIC_ORIGIN: Optional[str] = None

    class Config:
        env_file = ".env"

settings = Settings()
