import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    """Settings shared by every environment (each reads the process env once)."""

    # Token signing. Empty means "not configured".
    JWT_SECRET = os.environ.get("JWT_SECRET", "")
    TOKEN_TTL_HOURS = float(os.environ.get("TOKEN_TTL_HOURS", "0"))
    PASSWORD_HASH_METHOD = os.environ.get("PASSWORD_HASH_METHOD", "scrypt")

    PORT = int(os.environ.get("PORT", "3000"))

    DB_CONFIG = {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", ""),
        "database": os.environ.get("DB_NAME", "worktrack"),
    }

    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL", "admin@worktrack.local")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "admin123")
    ADMIN_NAME = os.environ.get("ADMIN_NAME", "Administrator")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None
