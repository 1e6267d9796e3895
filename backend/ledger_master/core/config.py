"""
Environment-driven settings
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Origins the mobile/web dev servers are served from
DEFAULT_CORS_ORIGINS = [
    "http://localhost:8081",
    "http://localhost:8000",
    "http://localhost:3000",
    "http://localhost:19006",
]


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Server and client configuration"""

    # Server
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ledger_master.db")
    SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
    CORS_ALLOWED_ORIGINS = _split_csv(
        os.getenv("CORS_ALLOWED_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS))
    )
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Client
    API_BASE_URL = os.getenv("LEDGER_API_BASE_URL", "http://localhost:3000/api")
    API_TIMEOUT = float(os.getenv("LEDGER_API_TIMEOUT", "15"))
    SESSION_FILE = os.getenv(
        "LEDGER_SESSION_FILE",
        str(Path.home() / ".ledger_master" / "session.json"),
    )
