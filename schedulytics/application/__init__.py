"""
Application Services Layer

Coordinates the job and greeting use cases.
"""

from .job_service import JobService
from .greeting_service import GreetingService

__all__ = [
    'JobService',
    'GreetingService',
]
