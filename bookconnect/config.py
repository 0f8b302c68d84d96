"""Configuration management."""
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration."""

    # Catalogue
    DATA_FILE = os.getenv("BOOKCONNECT_DATA_FILE") or None
    BOOKS_PER_PAGE = int(os.getenv("BOOKCONNECT_BOOKS_PER_PAGE", "36"))

    # Display
    DEFAULT_THEME = os.getenv("BOOKCONNECT_DEFAULT_THEME", "day")

    # Logging
    LOG_LEVEL = os.getenv("BOOKCONNECT_LOG_LEVEL", "INFO").upper()
