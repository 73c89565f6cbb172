import os

SECRET_KEY = "test-secret"

STORE_PATH = os.getenv("STORE_PATH", ":memory:")

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
JSON_LOGS = False

AUTO_MIGRATE = bool(int(os.getenv("AUTO_MIGRATE", "1")))
