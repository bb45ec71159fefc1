"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))
    REDIS_HEALTH_CHECK_INTERVAL: int = int(os.getenv("REDIS_HEALTH_CHECK_INTERVAL", "30"))

    # Work order store
    WORK_ORDER_KEY_PREFIX: str = os.getenv("WORK_ORDER_KEY_PREFIX", "workorder")

    # Inbound orders (accepted upstream) and outbound status notifications
    ORDER_STREAM: str = os.getenv("ORDER_STREAM", "orders")
    ORDER_CONSUMER_GROUP: str = os.getenv("ORDER_CONSUMER_GROUP", "backstage")
    ORDER_CONSUMER_NAME: str = os.getenv("ORDER_CONSUMER_NAME", "backstage-1")
    ORDER_CONSUMER_BATCH: int = int(os.getenv("ORDER_CONSUMER_BATCH", "10"))
    ORDER_CONSUMER_BLOCK_MS: int = int(os.getenv("ORDER_CONSUMER_BLOCK_MS", "2000"))
    ORDER_STATUS_STREAM: str = os.getenv("ORDER_STATUS_STREAM", "order-status")
    ORDER_STATUS_STREAM_MAXLEN: int = int(
        os.getenv("ORDER_STATUS_STREAM_MAXLEN", "10000")
    )


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
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
