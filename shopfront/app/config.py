import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "3000"))

    # Requests must be handled one at a time; the catalog store is unlocked.
    APP_THREADED = False


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
