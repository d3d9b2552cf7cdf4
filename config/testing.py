import os

# In-memory database lives as long as the app's single connection.
DATABASE_PATH = os.getenv("DATABASE_PATH", ":memory:")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True

MAX_CODE_ATTEMPTS = 20
HISTORY_LIMIT = 30

HOST = "127.0.0.1"
PORT = 3000
