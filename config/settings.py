import os
from dotenv import load_dotenv

load_dotenv()

API_TITLE = os.getenv("API_TITLE", "NIK Validation API")
API_VERSION = os.getenv("API_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
MAX_BATCH_SIZE = int(os.getenv("MAX_BATCH_SIZE", 500))
