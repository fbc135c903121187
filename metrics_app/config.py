from pydantic_settings import BaseSettings, SettingsConfigDict
import logging


# Hostname fragments of managed Postgres providers that terminate TLS with
# certificates the default trust store does not accept.
MANAGED_DB_HOST_HINTS = (
    "amazonaws",
    "render",
    "railway",
    "supabase",
    "azure",
    "gcp",
    "neon",
    "timescale",
    "heroku",
)


class Settings(BaseSettings):
    """
    Runtime configuration.

    PORT and DATABASE_URL are the only knobs a deployment normally sets;
    a .env file next to the process is read too, real environment wins.
    """

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Application
    app_name: str = "Metrics Backend"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database (empty = in-memory fallback)
    database_url: str = ""

    # Static assets served at "/"
    public_dir: str = "public"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


def requires_relaxed_tls(database_url: str) -> bool:
    """
    Decide whether certificate verification should be skipped.

    Heuristic substring match on the connection string, not a negotiation:
    managed hosts listed in MANAGED_DB_HOST_HINTS get relaxed TLS.
    """
    if not database_url:
        return False
    lowered = database_url.lower()
    return any(hint in lowered for hint in MANAGED_DB_HOST_HINTS)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s | %(levelname)s | %(message)s")


logger = logging.getLogger("metrics_app")

# Create settings instance
settings = Settings()
