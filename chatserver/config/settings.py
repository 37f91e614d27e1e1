"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # App settings
    APP_NAME = os.getenv("APP_NAME", "Chat Server")
    APP_VERSION = os.getenv("APP_VERSION", "0.1.0")
    DEBUG = _flag("DEBUG")
    TESTING = _flag("TESTING")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "6688"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./chat.db")
    DB_ECHO: bool = _flag("DB_ECHO")
    DB_CREATE_TABLES: bool = _flag("DB_CREATE_TABLES", "true")

    # Auth - Ed25519 key pair, either inline PEM or a path to a PEM file
    AUTH_PRIVATE_KEY: str = os.getenv("AUTH_PRIVATE_KEY", "")
    AUTH_PRIVATE_KEY_PATH: str = os.getenv("AUTH_PRIVATE_KEY_PATH", "fixtures/encoding.pem")
    AUTH_PUBLIC_KEY: str = os.getenv("AUTH_PUBLIC_KEY", "")
    AUTH_PUBLIC_KEY_PATH: str = os.getenv("AUTH_PUBLIC_KEY_PATH", "fixtures/decoding.pem")
    JWT_ISSUER: str = os.getenv("JWT_ISSUER", "chat_server")
    JWT_AUDIENCE: str = os.getenv("JWT_AUDIENCE", "chat_web")
    TOKEN_TTL_SECONDS: int = int(os.getenv("TOKEN_TTL_SECONDS", str(7 * 24 * 3600)))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH: str = os.getenv("LOG_PATH", "")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(request_id)s] [user=%(user_id)s] %(name)s: %(message)s",
    )


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


class ProductionConfig(Config):
    """Production configuration"""

    DB_CREATE_TABLES = _flag("DB_CREATE_TABLES", "false")
    # no bundled development keys; keys must be configured explicitly
    AUTH_PRIVATE_KEY_PATH = os.getenv("AUTH_PRIVATE_KEY_PATH", "")
    AUTH_PUBLIC_KEY_PATH = os.getenv("AUTH_PUBLIC_KEY_PATH", "")



# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
