"""
gRPC adapter for the job service.

Every call hands the caller's remaining deadline to the service so store
operations stop when the caller stops waiting.
"""

import logging
from contextlib import closing

from ...application.job_service import JobService
from .codec import job_from_message, job_to_message
from .error_mapping import map_errors, map_stream_errors
from .protos import schedulytics_pb2, schedulytics_pb2_grpc

logger = logging.getLogger(__name__)


class JobServicer(schedulytics_pb2_grpc.JobServiceServicer):
    """Implements the JobService RPCs on top of JobService."""

    def __init__(self, job_service: JobService):
        self.job_service = job_service

    @map_errors
    def CreateJob(self, request, context):
        job = self.job_service.create_job(
            job_from_message(request.job), timeout=context.time_remaining()
        )
        return schedulytics_pb2.CreateJobRes(job=job_to_message(job))

    @map_errors
    def ReadJob(self, request, context):
        job = self.job_service.read_job(request.id, timeout=context.time_remaining())
        return schedulytics_pb2.ReadJobRes(job=job_to_message(job))

    @map_errors
    def UpdateJob(self, request, context):
        job = self.job_service.update_job(
            request.job.id,
            job_from_message(request.job),
            timeout=context.time_remaining(),
        )
        return schedulytics_pb2.UpdateJobRes(job=job_to_message(job))

    @map_errors
    def DeleteJob(self, request, context):
        success = self.job_service.delete_job(
            request.id, timeout=context.time_remaining()
        )
        return schedulytics_pb2.DeleteJobRes(success=success)

    @map_stream_errors
    def ListJobs(self, request, context):
        """
        Stream every job as it is decoded.

        Stops early, releasing the cursor, once the caller has cancelled
        or its deadline has passed.
        """
        jobs = self.job_service.list_jobs(timeout=context.time_remaining())
        with closing(jobs):
            for job in jobs:
                if not context.is_active():
                    logger.info("ListJobs caller went away, stopping stream")
                    return
                yield schedulytics_pb2.ListJobsRes(job=job_to_message(job))
