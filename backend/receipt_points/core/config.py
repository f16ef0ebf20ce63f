# receipt_points/core/config.py
# Simple config loader: values come from the environment, with .env support
import os
from dotenv import load_dotenv

load_dotenv()

class SimpleSettings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./receipts.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

settings = SimpleSettings()
