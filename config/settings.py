import os

def env_bool(key, default=False):
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes", "on")

def env_float(key, default):
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    return float(raw)

COUNTRY_API_BASE_URL = os.getenv("COUNTRY_API_BASE_URL", "http://localhost:8080").rstrip("/")
COUNTRY_API_TIMEOUT = env_float("COUNTRY_API_TIMEOUT", 10.0)
RESPONSE_RENDER_MODE = os.getenv("RESPONSE_RENDER_MODE", "table").strip().lower()
VALIDATE_UPDATES = env_bool("VALIDATE_UPDATES")
