from dotenv import load_dotenv
import os
from pathlib import Path

# Load environment variables from .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

# Database configuration
DB_HOST = os.getenv("POSTGRES_HOST", "db")
DB_USER = os.getenv("POSTGRES_USER", "leasedesk")
DB_PASSWORD = os.getenv("POSTGRES_PASSWORD", "leasedesk")
DB_NAME = os.getenv("POSTGRES_DB", "leasedesk")
DB_PORT = os.getenv("POSTGRES_PORT", "5432")

# JWT configuration
SECRET_KEY = os.getenv("SECRET_KEY", "your_secret_key_here")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
REFRESH_TOKEN_EXPIRE_DAYS = int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "30"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Application configuration
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", os.getenv("APP_PORT", "8080")))

# Public URL of the frontend, used in invitation links
APP_URL = os.getenv("APP_URL", "http://localhost:8080")

# Pre-built frontend served at "/"
WEB_DIR = os.getenv("WEB_DIR", str(BASE_DIR / "web"))

INVITATION_TTL_DAYS = int(os.getenv("INVITATION_TTL_DAYS", "7"))

# Paystack configuration
PAYSTACK_SECRET_KEY = os.getenv("PAYSTACK_SECRET_KEY", "")
PAYSTACK_BASE_URL = os.getenv("PAYSTACK_BASE_URL", "https://api.paystack.co")
PAYSTACK_TIMEOUT = float(os.getenv("PAYSTACK_TIMEOUT", "10"))
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "NGN")

# Email configuration
EMAIL_FROM = os.getenv("EMAIL_FROM", "no-reply@leasedesk.app")
EMAIL_FROM_NAME = os.getenv("EMAIL_FROM_NAME", "LeaseDesk")
EMAIL_PORT = int(os.getenv("EMAIL_PORT", "1025"))
EMAIL_SERVER = os.getenv("EMAIL_SERVER", "mailhog")
EMAIL_SUPPRESS_SEND = os.getenv("EMAIL_SUPPRESS_SEND", "false").lower() == "true"

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")

# Database URL
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql+psycopg2://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
