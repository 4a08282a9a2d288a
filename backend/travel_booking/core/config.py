from functools import lru_cache

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Fields map to upper-case environment variables, e.g. LOG_LEVEL.
    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    app_name: str = "Travel Booking Registry"
    environment: str = "local"
    log_level: str = "INFO"
    default_meal_preference: str = "Vegetarian"
    seed_demo_data: bool = False


@lru_cache()
def get_settings() -> Settings:
    load_dotenv(".env")
    return Settings()


settings = get_settings()
