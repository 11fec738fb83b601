"""
main.py

Process entry point: connects to MongoDB, serves the gRPC API and shuts
both down cleanly on SIGINT or SIGTERM.

Environment:
  - MONGO_PW (or MONGO_URI) is required; see config/mongo_config.py
  - GRPC_HOST / GRPC_PORT choose the listen address (default 0.0.0.0:8010)
"""

import logging
import signal
import threading

from .config import MongoConfig, configure_logging, init_mongo
from .domain.errors import ConfigurationError
from .infrastructure.mongo_job_repository import MongoJobRepository
from .server_factory import ServerConfig, create_server

logger = logging.getLogger(__name__)


def main() -> int:
    server_config = ServerConfig()
    configure_logging(server_config.log_level)

    try:
        mongo_config = MongoConfig()
    except ConfigurationError as e:
        logger.error(f"error: {e}")
        return 1

    logger.info(f"Connecting to MongoDB at {mongo_config.masked_uri}")
    mongo = init_mongo(mongo_config)
    if not mongo.health_check():
        logger.critical("Could not connect to MongoDB")
        mongo.close()
        return 1
    logger.info("Connected to MongoDB")

    collection = mongo.collection(mongo_config.database, mongo_config.collection)
    try:
        bundle = create_server(MongoJobRepository(collection), server_config)
    except RuntimeError as e:
        logger.critical(f"Failed to start server: {e}")
        mongo.close()
        return 1

    stop_requested = threading.Event()

    def _request_stop(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}")
        stop_requested.set()

    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    bundle.start(server_config.health_check_interval)
    logger.info(f"Server successfully started on {server_config.address}")

    # wait in slices so signal handlers run on the main thread
    while not stop_requested.wait(timeout=1.0):
        pass

    bundle.stop(server_config.shutdown_grace)
    logger.info("Closing MongoDB connection")
    mongo.close()
    logger.info("Done.")
    return 0
