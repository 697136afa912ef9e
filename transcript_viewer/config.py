"""Configuration management"""

import logging
import os
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Application configuration"""

    def __init__(self):
        for key in sorted(os.environ.keys()):
            if any(prefix in key.upper() for prefix in ['BACKEND', 'REQUEST', 'FETCH', 'OUTPUT', 'FLASK']):
                logger.debug("%s = %s", key, os.environ[key][:50])

        # Backend Configuration
        self.backend_url = (
            os.getenv("BACKEND_URL")
            or os.getenv("NEXT_PUBLIC_BACKEND_URL")
            or "http://localhost:8000"
        ).rstrip("/")
        self.request_timeout_seconds = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

        # Page Configuration
        self.fetch_workers = int(os.getenv("FETCH_WORKERS", "2"))

        # Server Configuration
        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8080"))
        self.debug = self._parse_bool(os.getenv("FLASK_DEBUG", "false"))
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Output Configuration
        self.output_dir = Path(os.getenv("OUTPUT_DIR", "./output"))

    def _parse_bool(self, value: str) -> bool:
        """Parse boolean from string"""
        return value.lower() in ("true", "1", "yes", "on")

    def validate(self) -> None:
        """Validate configuration"""
        if urlparse(self.backend_url).scheme not in ("http", "https"):
            raise ValueError(f"BACKEND_URL must be an http(s) URL: {self.backend_url}")

        if self.request_timeout_seconds <= 0:
            raise ValueError("REQUEST_TIMEOUT_SECONDS must be positive")

        if self.fetch_workers < 1:
            raise ValueError("FETCH_WORKERS must be at least 1")


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the server and CLI entry points"""
    logging.basicConfig(
        level=getattr(logging, (level or config.log_level), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


# Global configuration instance
config = Config()
