# pos_checkout/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


BACKEND_URL = os.getenv("BACKEND_URL", "")
BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", 10))
BACKEND_RETRY_ATTEMPTS = int(os.getenv("BACKEND_RETRY_ATTEMPTS", 1))
INVOICE_STORE = os.getenv("INVOICE_STORE", "memory")
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./pos.db")
APPLY_STOCK_UPDATES = _flag("APPLY_STOCK_UPDATES")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
