from .config import Config, env_flag

JWT_SECRET = Config.JWT_SECRET
DEV_JWT_SECRET = "worktrack-dev-secret"
REQUIRE_JWT_SECRET = False
TOKEN_TTL_HOURS = Config.TOKEN_TTL_HOURS
PASSWORD_HASH_METHOD = Config.PASSWORD_HASH_METHOD

PORT = Config.PORT
DB_CONFIG = dict(Config.DB_CONFIG)

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
BOOTSTRAP_ADMIN = env_flag("BOOTSTRAP_ADMIN", "1")
ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD = Config.ADMIN_PASSWORD
ADMIN_NAME = Config.ADMIN_NAME

LOG_LEVEL = "DEBUG"
LOG_FILE = Config.LOG_FILE
