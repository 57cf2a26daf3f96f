import os

from dotenv import load_dotenv


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def get_settings():
    """Return runtime settings read from the environment.

    A `.env` file in the working directory is loaded first; variables already
    present in the environment win over the file.
    """
    load_dotenv()
    return {
        "environment": os.getenv("ENVIRONMENT", "local"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "db_user": os.getenv("DB_USER", ""),
        "db_password": os.getenv("DB_PASSWORD", ""),
        "db_host": os.getenv("DB_HOST", ""),
        "db_port": os.getenv("DB_PORT", ""),
        "db_name": os.getenv("DB_NAME", ""),
        "db_pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
        "db_max_overflow": int(os.getenv("DB_MAX_OVERFLOW", "10")),
        "db_pool_timeout": float(os.getenv("DB_POOL_TIMEOUT", "30")),
        "db_init_schema": _as_bool(os.getenv("DB_INIT_SCHEMA", "true")),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "api_host": os.getenv("API_HOST", "127.0.0.1"),
        "api_port": int(os.getenv("API_PORT", "8000")),
    }
