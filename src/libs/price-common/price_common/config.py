# src/libs/price-common/price_common/config.py
import logging
import os
from dotenv import load_dotenv

# Load environment variables from a .env file for local development.
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_POSTGRES_USER = "user"
DEFAULT_POSTGRES_PASSWORD = "password"

# Database Configurations
POSTGRES_USER = os.getenv("POSTGRES_USER", DEFAULT_POSTGRES_USER)
POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", DEFAULT_POSTGRES_PASSWORD)
POSTGRES_DB = os.getenv("POSTGRES_DB", "price_db")
POSTGRES_HOST = os.getenv("POSTGRES_HOST", "postgres")
POSTGRES_PORT = os.getenv("POSTGRES_PORT", "5432")

# Service identity, stamped on every log record
SERVICE_NAME = os.getenv("SERVICE_NAME", "price-query-service")
ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def uses_default_credentials(user: str = None, password: str = None) -> bool:
    """True when the database credentials were not overridden via the environment."""
    user = POSTGRES_USER if user is None else user
    password = POSTGRES_PASSWORD if password is None else password
    return user == DEFAULT_POSTGRES_USER and password == DEFAULT_POSTGRES_PASSWORD


def log_database_credentials_source() -> None:
    """Reports at startup whether the database credentials came from the environment."""
    if uses_default_credentials():
        logger.info("Database credentials: Using default credentials.")
        logger.warning(
            "Consider setting POSTGRES_USER and POSTGRES_PASSWORD environment variables for production"
        )
    else:
        logger.info("Database credentials: Using environment variables.")
