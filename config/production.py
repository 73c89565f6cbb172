import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_PATH = os.getenv("STORE_PATH", "/var/lib/attendance-tracker/attendance_store.db")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
JSON_LOGS = bool(int(os.getenv("JSON_LOGS", "1")))

AUTO_MIGRATE = bool(int(os.getenv("AUTO_MIGRATE", "0")))
