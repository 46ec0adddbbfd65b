import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./farm_ledger.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", 1))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Reporting
    REPORT_CURRENCY = data.get("REPORT_CURRENCY", "GHS")
    ROLLING_WINDOW_MONTHS = data.get("ROLLING_WINDOW_MONTHS", 12)
    LEDGER_PAGE_SIZE = data.get("LEDGER_PAGE_SIZE", 50)

    # Ledger Consistency Audit
    AUDIT_ENABLED = bool(data.get("AUDIT_ENABLED", True))
    AUDIT_INTERVAL_SECONDS = data.get("AUDIT_INTERVAL_SECONDS", 86400)  # Daily

    # Create missing tables on API startup (local SQLite setups)
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", 0))
