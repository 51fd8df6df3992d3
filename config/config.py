"""Settings shared by every environment module.

Values come from the process environment (``.env`` is loaded by the app
factory through python-dotenv before this package is imported).
"""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def db_config_from_env(default_database: str = "payroll_db") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", default_database),
    }


# The app serves a single local user; keep it off external interfaces by default.
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5000"))

DEFAULT_PROJECT_ID = os.getenv("DEFAULT_PROJECT_ID", "default")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
