import os

AUTH_USERNAME = os.getenv("AUTH_USERNAME", "admin")
AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "password123")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
