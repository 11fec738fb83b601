"""
v1 gRPC API

Servicers, message codec and error mapping for the schedulytics services.
"""

from .health import StoreHealthReporter
from .hello_servicer import HelloServicer
from .job_servicer import JobServicer
from .protos import schedulytics_pb2, schedulytics_pb2_grpc

__all__ = [
    "HelloServicer",
    "JobServicer",
    "StoreHealthReporter",
    "schedulytics_pb2",
    "schedulytics_pb2_grpc",
]
