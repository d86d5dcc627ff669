# File: /listview/core/config.py | Version: 1.3 | Title: Central Settings (Pydantic v2)
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --- Users API (client side) ---
    API_BASE: str = "http://localhost:8000"
    API_TIMEOUT: float = 10.0
    FETCH_LIMIT: int = 200  # records pulled once per session for client-side ops

    # --- List view defaults (also the values elided from the URL) ---
    DEFAULT_PAGE_SIZE: int = 12
    DEFAULT_SORT_FIELD: str = "firstName"

    # --- Development API ---
    DATABASE_URL: str = "sqlite:///./users.db"
    SEED_DEMO_USERS: bool = True
    ENABLE_STD_ERRORS: bool = (
        False  # set True in .env to enable standardized error responses
    )

    # v2-style config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
