"""
Store-backed gRPC health reporting.

Publishes the standard ``grpc.health.v1.Health`` service. The overall
status and the JobService status follow a MongoDB ping; HelloService does
not depend on the store and is always SERVING.
"""

import logging
import threading
from typing import Optional

from grpc_health.v1 import health, health_pb2

from ...application.job_service import JobService
from .protos import HELLO_SERVICE_NAME, JOB_SERVICE_NAME

logger = logging.getLogger(__name__)

OVERALL_SERVICE = ""


class StoreHealthReporter:
    """Keeps a HealthServicer in sync with job store reachability."""

    def __init__(
        self,
        job_service: JobService,
        health_servicer: Optional[health.HealthServicer] = None,
        ping_timeout: float = 2.0,
    ):
        self.job_service = job_service
        self.health_servicer = health_servicer or health.HealthServicer()
        self.ping_timeout = ping_timeout
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

        self.health_servicer.set(
            HELLO_SERVICE_NAME, health_pb2.HealthCheckResponse.SERVING
        )

    def refresh(self) -> bool:
        """
        Ping the store and publish the result.

        Returns:
            True if the store answered
        """
        serving = self.job_service.check_health(self.ping_timeout)
        status = (
            health_pb2.HealthCheckResponse.SERVING
            if serving
            else health_pb2.HealthCheckResponse.NOT_SERVING
        )
        for service in (OVERALL_SERVICE, JOB_SERVICE_NAME):
            self.health_servicer.set(service, status)

        if not serving:
            logger.warning("Job store unreachable, reporting NOT_SERVING")
        return serving

    def start(self, interval: float) -> None:
        """Refresh every ``interval`` seconds on a daemon thread."""
        if interval <= 0 or self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run, args=(interval,), name="store-health", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop refreshing and mark every service NOT_SERVING."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=self.ping_timeout + 1)
            self._thread = None
        self.health_servicer.enter_graceful_shutdown()

    def _run(self, interval: float) -> None:
        while not self._stop.wait(interval):
            self.refresh()
