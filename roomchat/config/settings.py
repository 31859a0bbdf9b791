"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    APP_ENV = os.getenv("APP_ENV", "development")
    TESTING = _env_flag("TESTING")
    DEBUG = _env_flag("DEBUG")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "your_service_name")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "your_service_audience")

    # Postgresql Database settings (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    STORAGE_TIMEOUT_SECONDS: float = float(os.getenv("STORAGE_TIMEOUT_SECONDS", "5"))
    STORAGE_READ_RETRY_WAIT_SECONDS: float = float(
        os.getenv("STORAGE_READ_RETRY_WAIT_SECONDS", "0.2")
    )

    # Messages
    MESSAGE_PAGE_DEFAULT: int = int(os.getenv("MESSAGE_PAGE_DEFAULT", "50"))
    MESSAGE_PAGE_MAX: int = int(os.getenv("MESSAGE_PAGE_MAX", "200"))
    MESSAGE_MAX_LENGTH: int = int(os.getenv("MESSAGE_MAX_LENGTH", "4000"))
    MESSAGE_MAX_MEDIA: int = int(os.getenv("MESSAGE_MAX_MEDIA", "10"))

    # Rooms
    ROOM_PAGE_DEFAULT: int = int(os.getenv("ROOM_PAGE_DEFAULT", "50"))
    ROOM_PAGE_MAX: int = int(os.getenv("ROOM_PAGE_MAX", "200"))
    ROOM_NAME_MAX_LENGTH: int = int(os.getenv("ROOM_NAME_MAX_LENGTH", "255"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True


class ProductionConfig(Config):
    """Production configuration"""

    pass


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
        env = Config.APP_ENV
    return config.get(env, config["default"])
