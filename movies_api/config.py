"""
Settings read from the process environment and an optional .env file.
"""

import os

from dotenv import load_dotenv

DATABASE_URL_KEY = "DATABASE_URL"

# process environment wins over .env
load_dotenv(".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = "DEBUG" if os.getenv("DEBUG") else "INFO"


def get_database_url() -> str:
    database_url = os.getenv(DATABASE_URL_KEY)
    if not database_url:
        raise EnvironmentError(f"Missing {DATABASE_URL_KEY} in environment or .env")
    return database_url
