AUTH_USERNAME = "admin"
AUTH_PASSWORD = "password123"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = False

HOST = "127.0.0.1"
PORT = 5000
