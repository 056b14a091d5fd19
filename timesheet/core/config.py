import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def parse_list_env(env_var: str, default: List[str] = None) -> List[str]:
    """Parse comma-separated environment variable into list"""
    if default is None:
        default = []

    value = os.getenv(env_var, "")
    if not value.strip():
        return default

    return [item.strip() for item in value.split(",") if item.strip()]

def parse_bool_env(env_var: str, default: bool = False) -> bool:
    """Parse boolean environment variable"""
    return os.getenv(env_var, str(default)).lower() in ("true", "1", "yes", "on")

class ServerConfig:
    """Server Configuration from Environment"""

    # Server settings
    HOST = os.getenv("TIMESHEET_HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", os.getenv("TIMESHEET_PORT", "3000")))
    WORKERS = int(os.getenv("TIMESHEET_WORKERS", "1"))
    LOG_LEVEL = os.getenv("TIMESHEET_LOG_LEVEL", "info")

    # Admin access: a single shared password, compared in plaintext
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")
    SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me-session-secret")
    SESSION_HTTPS_ONLY = parse_bool_env("SESSION_HTTPS_ONLY", False)

    # Database settings
    DATABASE_PATH = os.getenv("DATABASE_PATH", "timesheet.db")

    # Frontend assets served at / when the directory exists
    STATIC_DIR = os.getenv("STATIC_DIR", "public")

    # Development settings
    SEED_TEST_DATA = parse_bool_env("SEED_TEST_DATA", False)
    ENABLE_API_DOCS = parse_bool_env("ENABLE_API_DOCS", True)

    # CORS settings
    CORS_ORIGINS = parse_list_env("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = parse_bool_env("CORS_ALLOW_CREDENTIALS", True)

    # App metadata
    APP_NAME = os.getenv("APP_NAME", "Timesheet Server")
    APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
    APP_DESCRIPTION = os.getenv("APP_DESCRIPTION", "Daily work hours logging with weekly target hours per employee")
