from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import os
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # Google Places
    google_places_api_key: str = ""
    places_country: str = "fr"
    places_language: str = "fr"

    # Web server
    web_host: str = "0.0.0.0"
    port: int = 8080

    # Environment
    env: str = "development"
    debug: bool = False

    @field_validator('places_country', 'places_language', mode='before')
    @classmethod
    def lowercase_codes(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )

    @property
    def supabase_api_key(self) -> str:
        """Service key wins over the anon key when both are set"""
        return self.supabase_service_key or self.supabase_key


# Create settings instance
settings = Settings()

if os.getenv("DEBUG", "").lower() == "true":
    print("Settings loaded:")
    print(f"  SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}")
    print(f"  SUPABASE_KEY: {'set' if settings.supabase_api_key else 'MISSING'}")
    print(f"  GOOGLE_PLACES_API_KEY: {'set' if settings.google_places_api_key else 'MISSING'}")
