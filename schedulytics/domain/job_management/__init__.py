"""
Job Management Domain

Job identity, the Job entity and the repository interface it is stored through.
"""

from .entities import Job
from .value_objects import JobId
from .repositories import JobRepository

__all__ = [
    'Job',
    'JobId',
    'JobRepository',
]
