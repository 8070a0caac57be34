import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./backoffice.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    API_KEY_PREFIX = data.get("API_KEY_PREFIX", "osprey")
    SESSION_TTL_HOURS = float(data.get("SESSION_TTL_HOURS", 24))
    LOGIN_SESSION_TTL_HOURS = float(data.get("LOGIN_SESSION_TTL_HOURS", 168))
    MAX_SESSION_TTL_HOURS = float(data.get("MAX_SESSION_TTL_HOURS", 168))
    SESSION_PRUNE_INTERVAL_SECONDS = float(data.get("SESSION_PRUNE_INTERVAL_SECONDS", 3600))
