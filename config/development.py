import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Local embedded store file (":memory:" keeps everything in RAM)
STORE_PATH = os.getenv("STORE_PATH", "instance/attendance_store.db")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "0")))

# If enabled, app will bump db_version on startup (idempotent)
AUTO_MIGRATE = bool(int(os.getenv("AUTO_MIGRATE", "1")))
