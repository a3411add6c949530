import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Placeholder partner links live under this base until real affiliates are signed
AFFILIATE_BASE_URL = os.getenv("AFFILIATE_BASE_URL", "https://example.com").rstrip("/")
