"""Configuration management for the document analytics service."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Pagination Configuration
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "100"))  # characters per page

# Search Configuration
MIN_KEYWORD_LENGTH = int(os.getenv("MIN_KEYWORD_LENGTH", "3"))

# Fingerprint Configuration
HASH_ALGORITHM = os.getenv("HASH_ALGORITHM", "md5")
TEXT_ENCODING = os.getenv("TEXT_ENCODING", "utf-8")
