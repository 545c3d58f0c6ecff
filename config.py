"""
ImmoYield Config Module
-----------------------
Zentrale Konfiguration für die Listing-Ingestion.

Beinhaltet:
- Umgebungsvariablen
- Scraper-/Fetcher-Settings
- API-Settings
- Logging-Konfiguration
- Default-Annahmen für die Bewertung
"""

import os
from dotenv import load_dotenv

# -----------------------------
# Load .env if available
# -----------------------------
load_dotenv()

# -----------------------------
# Scraper configuration
# -----------------------------
SCRAPER = {
    # "http" = ein direkter GET, "browser" = Playwright/Chromium
    "BACKEND": os.getenv("SCRAPER_BACKEND", "http"),
    "TIMEOUT": float(os.getenv("SCRAPER_TIMEOUT", "20")),
    "BROWSER_TIMEOUT": 30000,
    "HEADLESS": True,
    "USER_AGENT": os.getenv(
        "SCRAPER_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36",
    ),
    "EXTRA_HEADERS": {},
    "LOCALE": "pt-BR",
    "MAX_CONCURRENCY": int(os.getenv("SCRAPER_MAX_CONCURRENCY", "5")),
}

# -----------------------------
# Logging configuration
# -----------------------------
LOGGING = {
    "LOG_FILE": os.getenv("LOG_FILE", ""),
    "LEVEL": os.getenv("LOG_LEVEL", "INFO"),
}

# -----------------------------
# API configuration
# -----------------------------
API = {
    "HOST": "0.0.0.0",
    "PORT": int(os.getenv("PORT", "8000")),
    "RELOAD": False,
    "TITLE": "ImmoYield API",
    "DESCRIPTION": "Listing ingestion and yield metrics",
    "CORS_ORIGINS": ["*"],
}

# -----------------------------
# Valuation defaults (Annahmen)
# -----------------------------
VALUATION = {
    "ASSUMPTIONS": {
        "iptu": 0.0,
        "condominio": 0.0,
        "itbi_pct": 3.0,
        "taxes_fixed": 0.0,
        "vacancy_pct": 5.0,
        "maint_pct": 5.0,
    },
    # Mietrendite-Faustregel, wenn keine Vergleichsmieten vorliegen
    "FALLBACK_RENT_RATIO": 0.006,
    "GOOD_NET_YIELD": 7.0,
    "FAIR_NET_YIELD": 5.0,
}


# -----------------------------
# Config classes
# -----------------------------
class Config:
    DEBUG = False
    TESTING = False
    SCRAPER = SCRAPER
    LOGGING = LOGGING
    API = API
    VALUATION = VALUATION


class DevConfig(Config):
    DEBUG = True
    SCRAPER = {**SCRAPER, "HEADLESS": False}
    LOGGING = {**LOGGING, "LEVEL": "DEBUG"}
    API = {**API, "RELOAD": True}


class ProdConfig(Config):
    DEBUG = False
    SCRAPER = {**SCRAPER, "HEADLESS": True}
    LOGGING = {**LOGGING, "LEVEL": "INFO"}


# active config
ACTIVE_CONFIG = ProdConfig() if os.getenv("ENV") == "prod" else DevConfig()
