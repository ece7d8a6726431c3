from .config import Config, env_flag

# No fallback: startup fails when JWT_SECRET is unset.
JWT_SECRET = Config.JWT_SECRET
REQUIRE_JWT_SECRET = True
TOKEN_TTL_HOURS = Config.TOKEN_TTL_HOURS
PASSWORD_HASH_METHOD = Config.PASSWORD_HASH_METHOD

PORT = Config.PORT
DB_CONFIG = dict(Config.DB_CONFIG)

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
BOOTSTRAP_ADMIN = env_flag("BOOTSTRAP_ADMIN", "1")
ADMIN_EMAIL = Config.ADMIN_EMAIL
ADMIN_PASSWORD = Config.ADMIN_PASSWORD
ADMIN_NAME = Config.ADMIN_NAME

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = Config.LOG_FILE
