JWT_SECRET = "test-secret"
DEV_JWT_SECRET = "test-secret"
REQUIRE_JWT_SECRET = False
TOKEN_TTL_HOURS = 0
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

PORT = 3000
DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "worktrack_test",
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
BOOTSTRAP_ADMIN = False
ADMIN_EMAIL = "admin@worktrack.local"
ADMIN_PASSWORD = "admin123"
ADMIN_NAME = "Administrator"

LOG_LEVEL = "WARNING"
LOG_FILE = None
