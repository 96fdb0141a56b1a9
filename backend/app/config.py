"""
Configuration settings for the CLAMM position API

Loads environment variables and provides application configuration.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # API Configuration
    API_VERSION: str = "0.1.0"
    API_TITLE: str = "CLAMM Position Math API"
    API_DESCRIPTION: str = "Bit-exact Q64.64 valuation of concentrated liquidity positions"

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000"
    ).split(",")

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Request Limits
    MAX_BATCH_POSITIONS: int = int(os.getenv("MAX_BATCH_POSITIONS", 200))

    # Tick spacing used when a full-range check omits it
    DEFAULT_TICK_SPACING: int = int(os.getenv("DEFAULT_TICK_SPACING", 1))


# Create global settings instance
settings = Settings()
