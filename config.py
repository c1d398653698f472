"""Curriculum API config

Every setting has a safe default so the service boots without any env vars.
A local .env file is honoured when present.
"""

from __future__ import annotations

import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent


# -----------------------------
# helpers
# -----------------------------
def _env(key: str, default: str = "") -> str:
    v = os.getenv(key)
    return default if v is None else str(v).strip()

def _env_int(key: str, default: int) -> int:
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return default
    try:
        return int(str(v).strip())
    except Exception:
        return default

def _env_list(key: str, default: Optional[List[str]] = None, sep: str = ",") -> List[str]:
    if default is None:
        default = []
    v = os.getenv(key)
    if v is None or str(v).strip() == "":
        return list(default)
    return [s.strip() for s in str(v).split(sep) if s.strip()]

def _resolve_path(raw: str) -> Path:
    p = Path(raw)
    return p if p.is_absolute() else BASE_DIR / p


# -----------------------------
# logging
# -----------------------------
LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("curriculum-api")


# -----------------------------
# server
# -----------------------------
HOST = _env("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3220)

ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", default=["*"])


# -----------------------------
# document store
# -----------------------------
MONGO_URL = _env("MONGO_URL", "mongodb://localhost:27017")
MONGO_DB = _env("MONGO_DB", "mongo-test")
MONGO_COLLECTION = _env("MONGO_COLLECTION", "courses")
MONGO_TIMEOUT_MS = _env_int("MONGO_TIMEOUT_MS", 5000)


# -----------------------------
# curriculum source
# -----------------------------
COURSES_FILE = _resolve_path(_env("COURSES_FILE", "courses.json"))


@dataclass(frozen=True)
class Settings:
    host: str = HOST
    port: int = PORT
    mongo_url: str = MONGO_URL
    mongo_db: str = MONGO_DB
    mongo_collection: str = MONGO_COLLECTION
    mongo_timeout_ms: int = MONGO_TIMEOUT_MS
    courses_file: Path = COURSES_FILE
    allowed_origins: List[str] = field(default_factory=lambda: list(ALLOWED_ORIGINS))


def load_settings() -> Settings:
    """Snapshot of the module-level settings, read once at import time."""
    return Settings()
