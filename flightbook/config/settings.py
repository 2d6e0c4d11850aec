"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Flight storage
    DATA_DIR: str = os.getenv("DATA_DIR", "data")
    FLIGHTS_FILE: str = os.getenv("FLIGHTS_FILE", "flights.json")

    # Server
    PORT: str = os.getenv("PORT", "3000")

    # Client (Streamlit UI -> Flights API)
    FLIGHTS_API_URL: str = os.getenv("FLIGHTS_API_URL", "http://localhost:3000")
    FLIGHTS_API_TIMEOUT: str = os.getenv("FLIGHTS_API_TIMEOUT", "10")

    # Rate Limiting
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_STORAGE_URI: str = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_DEFAULT: str = os.getenv("RATELIMIT_DEFAULT", "1000 per hour;100 per minute")

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    @classmethod
    def flights_file_path(cls) -> str:
        """Full path of the JSON file backing the flight store."""
        return os.path.join(cls.DATA_DIR, cls.FLIGHTS_FILE)

    @classmethod
    def validate(cls) -> None:
        """Validate numeric configuration values."""
        numeric_vars = [
            ("PORT", cls.PORT),
            ("FLIGHTS_API_TIMEOUT", cls.FLIGHTS_API_TIMEOUT),
        ]

        invalid = [
            name for name, value in numeric_vars
            if not str(value).isdigit() or int(value) <= 0
        ]
        if invalid:
            raise ValueError(f"Invalid numeric environment variables: {', '.join(invalid)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
