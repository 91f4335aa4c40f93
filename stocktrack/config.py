from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "StockTrack"
    ENVIRONMENT: str = "local"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: str = "*"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./stocktrack.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Spreadsheet exports
    # ==============================
    EXPORTS_DIR: str = "exports"
    SALES_WORKBOOK_NAME: str = "sales.xlsx"
    EXPORT_WORKBOOK_NAME: str = "sales_export.xlsx"
    SALES_SHEET_NAME: str = "Sales"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
