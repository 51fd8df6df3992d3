import os

from .config import DEFAULT_PROJECT_ID, HOST, LOG_LEVEL, PORT, db_config_from_env, env_flag  # noqa: F401

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
