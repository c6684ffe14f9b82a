# storefront/utils/settings.py
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
API_PREFIX = os.getenv("API_PREFIX", "/v1")
CATALOG_DIR = Path(os.getenv("CATALOG_DIR", Path(__file__).resolve().parent.parent / "data" / "fixtures"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
