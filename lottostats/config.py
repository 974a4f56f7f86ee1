"""
Runtime settings for the lottery statistics pipeline.

Values come from the environment (optionally a local .env file).
"""
import logging
import os

from dotenv import load_dotenv

load_dotenv()

_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    # Storage
    DATA_DIR = os.getenv("LOTTOSTATS_DATA_DIR", os.path.join(_ROOT_DIR, "data"))

    # NY Open Data (SODA) API
    SODA_ROW_LIMIT = int(os.getenv("SODA_ROW_LIMIT", "50000"))
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    RETRY_ATTEMPTS = int(os.getenv("RETRY_ATTEMPTS", "3"))
    RETRY_BASE_DELAY = float(os.getenv("RETRY_BASE_DELAY", "1.0"))

    # Logging configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Application settings
    DEBUG = os.getenv("DEBUG", "False").lower() in ("true", "1", "t")


def configure_logging(level=None):
    """Set up root logging for scripts and the dashboard."""
    level = level or ("DEBUG" if Config.DEBUG else Config.LOG_LEVEL)
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
