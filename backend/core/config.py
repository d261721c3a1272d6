import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///:memory:")

ENABLE_GLOBAL_ERROR_LOGGING = _get_bool(os.getenv("ENABLE_GLOBAL_ERROR_LOGGING"), default=False)
ENABLE_REQUEST_LOGGING = _get_bool(os.getenv("ENABLE_REQUEST_LOGGING"), default=True)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = _get_list(os.getenv("CORS_ORIGINS"), ["http://localhost:3000"])


def is_memory_database(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/") in {"sqlite:", "sqlite:/"})


def validate_runtime_config() -> None:
    if APP_ENV.lower() == "production" and is_memory_database(DATABASE_URL):
        raise RuntimeError("DATABASE_URL must point at a persistent database in production.")
