from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DB_URI: str = "sqlite:///./assettrack.db"
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""  # empty keeps logging on stderr only
    LOG_FILE: str = "assettrack.log"
    # Report branding
    COMPANY_NAME: str = "Hesu Investment Limited"
    REPORT_SUBTITLE: str = "Devices List and Employee Assigned To"
    # Dashboard / import tuning
    TOP_EMPLOYEES_LIMIT: int = 5
    RECENT_ASSIGNMENTS_LIMIT: int = 5
    MAX_IMPORT_BYTES: int = 5_000_000
    SEED_SAMPLE_DATA: bool = True

    model_config = SettingsConfigDict(
        env_file=[
            Path(__file__).resolve().parents[2] / ".env",
            Path(".env"),
        ],
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
