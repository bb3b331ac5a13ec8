from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Product Inventory"
    APP_DESCRIPTION: str = "Console product inventory manager backed by a relational database"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Database (SQLModel, async driver) ---
    DATABASE_URL: str = "sqlite+aiosqlite:///products.db"
    DB_ECHO: bool = False
    SEED_ON_STARTUP: bool = True  # Insert seed products when the table is empty

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "WARNING"  # Console level; files always get DEBUG
    LOG_TO_FILE: bool = True

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
