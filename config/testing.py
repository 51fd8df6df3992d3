from .config import DEFAULT_PROJECT_ID, HOST, PORT, db_config_from_env  # noqa: F401

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env("payroll_test_db")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
