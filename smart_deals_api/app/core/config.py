"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that local development does not require exporting
variables by hand.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Smart Deals API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # A complete connection string takes precedence.  When it is empty
    # the URI is assembled from DB_USER, DB_PASSWORD and DB_HOST by
    # ``resolve_mongodb_uri``.
    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    db_user: str = os.getenv("DB_USER", "")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_host: str = os.getenv("DB_HOST", "localhost:27017")
    db_name: str = os.getenv("DB_NAME", "SmartDB")
    deals_collection: str = os.getenv("DEALS_COLLECTION", "SmartDeals")
    bids_collection: str = os.getenv("BIDS_COLLECTION", "Bids")

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def resolve_mongodb_uri(self) -> str:
        """Return the MongoDB connection string.

        Hosts given without a port are treated as Atlas cluster names
        and use the ``mongodb+srv`` scheme.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        scheme = "mongodb" if ":" in self.db_host else "mongodb+srv"
        if self.db_user:
            return f"{scheme}://{self.db_user}:{self.db_password}@{self.db_host}/"
        return f"{scheme}://{self.db_host}/"

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
