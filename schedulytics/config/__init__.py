"""Environment-driven configuration."""

from .logging_config import configure_logging
from .mongo_config import MongoConfig, init_mongo

__all__ = [
    "configure_logging",
    "MongoConfig",
    "init_mongo",
]
