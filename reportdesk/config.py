"""
Application configuration read from the environment (or a local .env file).
Only the store connection and a few runtime knobs are configurable.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Supabase project
    supabase_url: str = Field("", validation_alias="SUPABASE_URL")
    supabase_anon_key: str = Field("", validation_alias="SUPABASE_ANON_KEY")

    # Identity used by the dashboard when no session token is present
    guest_user_id: str = "guest"

    # Logging
    log_level: str = "info"
    json_logs: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "REPORTDESK_",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
