"""gRPC job backend on MongoDB."""

__version__ = "0.1.0"
