"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    # Report API
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:3000/api")
    REPORT_ENDPOINT: str = os.getenv("REPORT_ENDPOINT", "/relatorios/{report_id}")
    REQUEST_TIMEOUT_S: float = float(os.getenv("REQUEST_TIMEOUT_S", "15"))

    # Serve the bundled sample payload instead of calling the API
    DEMO_MODE: bool = os.getenv("DEMO_MODE", "false").lower() == "true"
    SAMPLE_SEED: int = int(os.getenv("SAMPLE_SEED", "42"))

    # i18n: target locale for dates and month names
    LOCALE: str = os.getenv("LOCALE", "pt-BR")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Pagination (rows per printed page)
    ROWS_PER_PAGE_OBSERVATION: int = int(os.getenv("ROWS_PER_PAGE_OBSERVATION", "13"))
    ROWS_PER_PAGE: int = int(os.getenv("ROWS_PER_PAGE", "15"))


settings = Settings()
