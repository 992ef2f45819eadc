# config.py
"""
Environment-driven settings for the apartments API.

Values are read once at import time from the process environment,
after loading an optional .env file.
"""
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
     return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")

# Full URL override (e.g. sqlite:// for local runs); otherwise Azure SQL via pymssql
DATABASE_URL = os.getenv("DATABASE_URL") or (
     f"mssql+pymssql://{quote_plus(DB_USER or '')}:{quote_plus(DB_PASS or '')}"
     f"@{DB_SERVER}:{DB_PORT}/{DB_NAME}"
)
SQL_ECHO = _env_flag("SQL_ECHO")

# App
APP_ENV = os.getenv("APP_ENV", "production")
PORT = int(os.getenv("PORT", 10000))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

# Auth for write endpoints
AUTH_REQUIRED = _env_flag("AUTH_REQUIRED")
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
