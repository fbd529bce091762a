import os


def _split_env(name: str, default: str) -> list:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


# Logging
LOG_LEVEL = os.environ.get("BEAUTYCAM_LOG_LEVEL", "INFO").upper()

# CORS configuration (adjust origins as needed, e.g., http://localhost:5173 for Vite)
CORS_ALLOW_ORIGINS = _split_env("BEAUTYCAM_CORS_ORIGINS", "*")
CORS_ALLOW_CREDENTIALS = os.environ.get("BEAUTYCAM_CORS_CREDENTIALS", "true").strip().lower() in {"1", "true", "yes", "on"}
CORS_ALLOW_METHODS = _split_env("BEAUTYCAM_CORS_METHODS", "*")
CORS_ALLOW_HEADERS = _split_env("BEAUTYCAM_CORS_HEADERS", "*")
