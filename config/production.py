import os

DATABASE_PATH = os.getenv("DATABASE_PATH", "Asistencia.db")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

MAX_CODE_ATTEMPTS = int(os.getenv("MAX_CODE_ATTEMPTS", "20"))
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "30"))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
