"""
Environment-driven settings.
Values come from the process environment, optionally seeded from a .env file.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_DIR = os.getenv("LOG_DIR", "logs")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Stand-in for a network round-trip on edit/delete
SIMULATED_LATENCY_SECONDS = float(os.getenv("SIMULATED_LATENCY_SECONDS", "0.5"))

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "25"))

PORT = int(os.getenv("PORT", "8501"))
