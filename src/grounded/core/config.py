"""
Application configuration settings loaded from config.yaml
"""
import os
import yaml
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class DatabasePoolConfig(BaseModel):
    """Database connection pool configuration"""
    size: int = 10  # Number of connections to maintain
    max_overflow: int = 20  # Maximum overflow connections
    timeout: int = 30  # Seconds to wait for a connection
    recycle: int = 3600  # Seconds before recycling a connection
    echo: bool = False  # Log SQL queries


class DatabaseConfig(BaseModel):
    """Database configuration"""
    url_override: Optional[str] = Field(None, alias="url")  # Explicit SQLAlchemy URL, e.g. sqlite
    server: str = "localhost"
    user: str = "postgres"
    password: str = ""
    db: str = "grounded"
    port: str = "5432"
    pool: DatabasePoolConfig = DatabasePoolConfig()

    class Config:
        populate_by_name = True

    @property
    def url(self) -> str:
        """Construct database URL"""
        if self.url_override:
            return self.url_override
        return f"postgresql://{self.user}:{self.password}@{self.server}:{self.port}/{self.db}"

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class SecurityConfig(BaseModel):
    """Security configuration"""
    secret_key: str
    session_cookie: str = "grounded_session"
    session_max_age: int = 14 * 24 * 3600  # Seconds
    https_only: bool = False


class CatalogConfig(BaseModel):
    """Plant catalog partition files"""
    data_dir: str = "data"
    file_prefix: str = "plants-"
    file_suffix: str = ".json"
    cache_ttl: int = 3600  # Seconds, never more than an hour
    stale_while_revalidate: int = 86400  # Seconds, edge cache only
    seed_on_startup: bool = False

    @field_validator("cache_ttl")
    @classmethod
    def cap_cache_ttl(cls, v):
        return max(0, min(v, 3600))


class InvoiceConfig(BaseModel):
    """Invoice numbering and terms"""
    prefix: str = "INV-"
    starting_number: int = 1001
    number_retries: int = 3
    payment_terms_days: int = 30


class MapsConfig(BaseModel):
    """External navigation links"""
    directions_url: str = "https://www.google.com/maps/dir/?api=1"
    search_url: str = "https://www.google.com/maps/search/?api=1"


class Settings(BaseModel):
    """Application settings loaded from config.yaml"""

    # Project settings
    project_name: str = "Grounded Landscaping API"
    version: str = "1.0.0"
    description: str = "Back office API for clients, jobs, invoices, leads and the plant catalog"
    api_v1_str: str = "/api/v1"

    # Database settings
    database: DatabaseConfig

    @property
    def DATABASE_URL(self) -> str:
        """Construct database URL"""
        return self.database.url

    # CORS settings
    backend_cors_origins: List[str] = []

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Security settings
    security: SecurityConfig

    catalog: CatalogConfig = CatalogConfig()
    invoices: InvoiceConfig = InvoiceConfig()
    maps: MapsConfig = MapsConfig()

    # Logging
    log_level: str = "INFO"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file. If None, looks in:
                    1. The GROUNDED_CONFIG environment variable
                    2. Current directory
                    3. Project root (src/../config.yaml)

    Returns:
        Settings: Loaded and validated settings
    """
    if config_path is None:
        config_path = os.environ.get("GROUNDED_CONFIG")

    if config_path is None:
        # Try current directory first
        current_dir = Path.cwd() / "config.yaml"
        if current_dir.exists():
            config_path = str(current_dir)
        else:
            # Try project root (assuming we're in src/grounded/core/)
            project_root = Path(__file__).parent.parent.parent.parent / "config.yaml"
            if project_root.exists():
                config_path = str(project_root)
            else:
                raise FileNotFoundError(
                    "config.yaml not found. Please create config.yaml in the project root."
                )

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r") as f:
        config_data = yaml.safe_load(f)

    if config_data is None:
        raise ValueError("Configuration file is empty or invalid")

    return Settings(**config_data)


# Load settings on module import
settings = load_config()
