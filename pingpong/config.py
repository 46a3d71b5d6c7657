import os
from dotenv import load_dotenv
from pytz import timezone as dt_timezone

load_dotenv()  # Optional if you're also running locally with a .env file

# ✅ Feed size and display timezone
RECENT_MATCHES_LIMIT = int(os.getenv("RECENT_MATCHES_LIMIT", 5))
TIMEZONE = dt_timezone(os.getenv("TIMEZONE", "Asia/Singapore"))

# ✅ Server settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
