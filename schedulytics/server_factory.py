"""
Server Factory

Creates and configures the gRPC server with all servicers. Dependencies
are passed in explicitly so tests can assemble a server around an
in-memory repository.
"""

import logging
import os
from concurrent import futures
from typing import Optional

import grpc
from grpc_health.v1 import health_pb2_grpc

from .api.v1 import HelloServicer, JobServicer, StoreHealthReporter, schedulytics_pb2_grpc
from .application.greeting_service import GreetingService
from .application.job_service import JobService
from .domain.job_management.repositories import JobRepository

logger = logging.getLogger(__name__)


class ServerConfig:
    """gRPC server configuration."""

    def __init__(self):
        self.host = os.getenv("GRPC_HOST", "0.0.0.0")
        self.port = int(os.getenv("GRPC_PORT", 8010))
        self.max_workers = int(os.getenv("GRPC_MAX_WORKERS", 10))
        self.shutdown_grace = float(os.getenv("GRPC_SHUTDOWN_GRACE", 5))
        self.health_check_interval = float(os.getenv("HEALTH_CHECK_INTERVAL", 30))
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


class ServerBundle:
    """A started-or-startable server together with what it was built from."""

    def __init__(
        self,
        server: grpc.Server,
        port: int,
        job_service: JobService,
        health_reporter: StoreHealthReporter,
    ):
        self.server = server
        self.port = port
        self.job_service = job_service
        self.health_reporter = health_reporter

    def start(self, health_check_interval: float = 0) -> None:
        self.health_reporter.refresh()
        self.server.start()
        self.health_reporter.start(health_check_interval)
        logger.info(f"Server listening on port {self.port}")

    def stop(self, grace: Optional[float] = None) -> None:
        """Stop accepting calls and let in-flight ones finish within ``grace``."""
        logger.info("Stopping the server...")
        self.health_reporter.stop()
        self.server.stop(grace).wait()


def create_server(
    job_repository: JobRepository,
    config: Optional[ServerConfig] = None,
) -> ServerBundle:
    """
    Create and configure the gRPC server.

    Args:
        job_repository: Repository the job service stores through
        config: Server configuration, uses default if None

    Returns:
        ServerBundle with the bound port; call ``start()`` to serve

    Raises:
        RuntimeError: If the listen address cannot be bound
    """
    if config is None:
        config = ServerConfig()

    job_service = JobService(job_repository)
    greeting_service = GreetingService()
    health_reporter = StoreHealthReporter(job_service)

    server = grpc.server(futures.ThreadPoolExecutor(max_workers=config.max_workers))
    _register_servicers(server, job_service, greeting_service, health_reporter)

    port = server.add_insecure_port(config.address)
    if port == 0:
        raise RuntimeError(f"failed to listen on {config.address}")

    return ServerBundle(server, port, job_service, health_reporter)


def _register_servicers(
    server: grpc.Server,
    job_service: JobService,
    greeting_service: GreetingService,
    health_reporter: StoreHealthReporter,
) -> None:
    schedulytics_pb2_grpc.add_JobServiceServicer_to_server(JobServicer(job_service), server)
    schedulytics_pb2_grpc.add_HelloServiceServicer_to_server(
        HelloServicer(greeting_service), server
    )
    health_pb2_grpc.add_HealthServicer_to_server(health_reporter.health_servicer, server)
    logger.debug("Registered JobService, HelloService and Health servicers")
