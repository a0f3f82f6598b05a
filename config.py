"""Configuration settings"""
import os

# Clock settings
TICK_INTERVAL_SECONDS = 0.2  # 200 ms refresh cadence while running
DRIFT_TOLERANCE_SECONDS = 5  # Drift magnitude hidden below this
SLIDE_WARNING_SECONDS = 30  # Slide timer turns to "warning" below this

# Schedule defaults
DEFAULT_TOTAL_TIME_MINUTES = 20
DEFAULT_SLIDE_COUNT = 10
DEFAULT_NEW_SLIDE_DURATION = 60
DEFAULT_SLIDE_TITLE = "Slide {number}"

# Plan generation settings
PLAN_PROVIDER = os.getenv("PLAN_PROVIDER", "gemini")
PLAN_MODEL = os.getenv("PLAN_MODEL", "gemini-2.5-flash")
PLAN_MAX_TOKENS = 8192

# API keys (read at call time through get_api_key)
API_KEY_ENV = {
    "gemini": ("GEMINI_API_KEY", "API_KEY"),
    "openai": ("OPENAI_API_KEY",),
    "openrouter": ("OPENROUTER_API_KEY",),
}

# API settings
API_TIMEOUT = 60
API_BASE_URL = os.getenv("CHRONOSLIDE_API_URL", "http://localhost:8000/api/v1")

# Logging
LOG_DIR = "logs"


def get_api_key(provider: str) -> str:
    """Return the first non-empty API key configured for provider"""
    for name in API_KEY_ENV.get(provider, ()):
        value = os.getenv(name, "")
        if value:
            return value
    return ""
