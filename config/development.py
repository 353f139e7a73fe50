import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | json | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_DIR = os.getenv("DATA_DIR", "data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# Fixed seed makes the generated 30-day history reproducible
SEED_RANDOM_SEED = int(os.environ["SEED_RANDOM_SEED"]) if os.getenv("SEED_RANDOM_SEED") else None
