from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # DB bootstrap (dev only)
    AUTO_DB_BOOTSTRAP: bool = False
    # Load the demo users/departments/requests into empty tables at startup.
    SEED_DEMO_DATA: bool = False

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
