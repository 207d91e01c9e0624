"""
teamgen/config.py - Cấu hình môi trường cho backend Gerador de Times
"""
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = (
    "https://gerador-times.netlify.app,"
    "http://localhost:8100,"
    "http://localhost:3000"
)


def _split(value: str) -> list:
    return [v.strip() for v in value.split(",") if v.strip()]


class Config:
    """Base configuration"""
    # --- Flask ---
    SECRET_KEY = os.getenv("SECRET_KEY", "teamgen-secret-key-change-in-prod")
    DEBUG = False
    TESTING = False
    APP_VERSION = "1.0.0"

    # --- Database ---
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = False

    # --- CORS ---
    CORS_ORIGINS = _split(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))

    # --- Identity ---
    # Claims tried in order to resolve the caller from an (unverified) bearer token
    AUTH_IDENTITY_CLAIMS = tuple(_split(os.getenv("AUTH_IDENTITY_CLAIMS", "sub,user_id")))

    # --- Logging ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///teamgen_dev.db"
    )
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL")
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
