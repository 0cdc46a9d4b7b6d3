import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

class Settings:
    ENV: str = os.getenv("ENV", "local")

    # App identity
    APP_NAME: str = os.getenv("APP_NAME", "User Profile API")
    API_V1_PREFIX: str = os.getenv("API_V1_PREFIX", "/api/v1")

    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", 8080))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    # Store
    SEED_DEMO_USERS: bool = os.getenv("SEED_DEMO_USERS", "True").lower() == "true"

    # CORS
    BACKEND_CORS_ORIGINS: Optional[str] = os.getenv("BACKEND_CORS_ORIGINS")



settings = Settings()
