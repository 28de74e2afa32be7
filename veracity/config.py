"""
Veracity Configuration

Central settings loaded from environment variables.
The scoring pipeline itself never reads these; they size and expose the
HTTP layer.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Input Limits ---
    MAX_TEXT_LENGTH: int = int(os.getenv("VERACITY_MAX_TEXT_LENGTH", "50000"))
    MAX_BATCH_ITEMS: int = int(os.getenv("VERACITY_MAX_BATCH_ITEMS", "50"))
    MAX_DURATION_SECONDS: float = float(
        os.getenv("VERACITY_MAX_DURATION_SECONDS", "86400")
    )

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("VERACITY_CORS_ORIGINS", "*")


settings = Settings()
