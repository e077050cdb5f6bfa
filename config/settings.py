"""
Configuration settings for the receipt extractor
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

from config.exceptions import ConfigurationError

# Load environment variables
load_dotenv()

# Versioned API root of the extraction service; not overridable
API_BASE_URL = "https://api.jamaibase.com/v1"

# Seconds, applied to every request
REQUEST_TIMEOUT = 30


class Settings(BaseSettings):
    """Application settings"""

    # JamAI Base credentials
    project_id: str = ""
    pat: str = ""

    # Application
    log_level: str = "INFO"
    log_dir: Path = Path("logs")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        frozen = True

    @property
    def base_url(self) -> str:
        return API_BASE_URL

    @property
    def timeout(self) -> int:
        return REQUEST_TIMEOUT

    def missing_credentials(self) -> list:
        """Names of the required environment variables that are unset or blank"""
        missing = []
        if not self.project_id.strip():
            missing.append("PROJECT_ID")
        if not self.pat.strip():
            missing.append("PAT")
        return missing


def load_settings(env_file: Optional[str] = ".env") -> Settings:
    """
    Build the settings once at startup

    Args:
        env_file: Optional .env file to read in addition to the process environment

    Raises:
        ConfigurationError: if PROJECT_ID or PAT is missing
    """
    settings = Settings(_env_file=env_file)

    missing = settings.missing_credentials()
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {' and '.join(missing)} must be set"
        )

    return settings
