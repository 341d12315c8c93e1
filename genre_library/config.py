import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Genre Library")

    # CLI output: plain | json | rich
    output_mode: str = os.getenv("LIBRARY_OUTPUT", "plain")

    # Logging
    log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "WARNING").upper()

    # Seed the catalog from this JSON file instead of the sample books
    catalog_file: Optional[str] = os.getenv("LIBRARY_CATALOG_FILE") or None


settings = Settings()
