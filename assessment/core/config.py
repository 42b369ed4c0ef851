from __future__ import annotations

import os
from functools import lru_cache
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)

_ONE_YEAR = 365 * 24 * 60 * 60


class Settings:
    """Central configuration (env driven)."""

    def __init__(self) -> None:
        # Supabase
        raw_url = os.getenv("SUPABASE_URL", "")
        self.supabase_url: str = raw_url.rstrip("/")
        self.supabase_anon_key: str = os.getenv("SUPABASE_ANON_KEY") or os.getenv("SUPABASE_KEY", "")
        self.supabase_key: str = self.supabase_anon_key  # alias
        # Database (migrations only)
        self.database_url: str = os.getenv("DATABASE_URL", "")
        # App meta
        self.app_name: str = os.getenv("APP_TITLE", "IGTA-Tech Skills Assessment")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        # Candidate session cookie
        self.session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "candidate_email")
        try:
            self.session_cookie_max_age: int = int(os.getenv("SESSION_COOKIE_MAX_AGE", str(_ONE_YEAR)))
        except ValueError:
            self.session_cookie_max_age = _ONE_YEAR
        self.cookie_domain: str | None = os.getenv("COOKIE_DOMAIN") or None
        self.cookie_secure: bool = os.getenv("COOKIE_SECURE", "true").lower() != "false"
        self.cookie_samesite: str = os.getenv("COOKIE_SAMESITE", "lax").capitalize()  # Lax|Strict|None
        # CORS for the JSON API
        self.allow_origins: list[str] = [
            o.strip().rstrip("/")
            for o in os.getenv("ALLOW_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
            if o.strip()
        ]

    def get_database_url(self) -> str:
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    return Settings()
