"""
Contract tests for JobRepository implementations.

Every implementation must satisfy the same behavior. The MongoDB variant
runs only when MONGO_TEST_URI points at a disposable server.
"""

import os

import pytest
from bson import ObjectId

from schedulytics.domain.job_management import JobRepository
from schedulytics.infrastructure.mongo_connection import MongoConnectionManager
from schedulytics.infrastructure.mongo_job_repository import MongoJobRepository

from tests.fixtures import MockJobRepository, create_job, create_job_id

MONGO_TEST_URI = os.getenv("MONGO_TEST_URI")


@pytest.fixture
def mongo_repository():
    if not MONGO_TEST_URI:
        pytest.skip("MONGO_TEST_URI not set")
    manager = MongoConnectionManager(MONGO_TEST_URI, serverSelectionTimeoutMS=2000)
    if not manager.health_check(timeout=2.0):
        manager.close()
        pytest.skip("MongoDB at MONGO_TEST_URI is unreachable")
    collection = manager.collection("schedulytics_test", f"job_{ObjectId()}")
    yield MongoJobRepository(collection)
    collection.drop()
    manager.close()


@pytest.fixture(params=["memory", "mongo"])
def repository(request) -> JobRepository:
    if request.param == "memory":
        return MockJobRepository()
    return request.getfixturevalue("mongo_repository")


@pytest.mark.contract
class TestJobRepositoryContract:

    def test_insert_assigns_new_id(self, repository):
        supplied = create_job_id()

        created = repository.insert(create_job(job_id=supplied), timeout=5)

        assert created.job_id is not None
        assert created.job_id != supplied

    def test_get_returns_inserted_job(self, repository):
        created = repository.insert(create_job(name="A", owner="B", description="C"), timeout=5)

        assert repository.get(created.job_id, timeout=5) == created

    def test_get_unknown_is_none(self, repository):
        assert repository.get(create_job_id(), timeout=5) is None

    def test_update_returns_post_update_state(self, repository):
        created = repository.insert(create_job(), timeout=5)
        changes = create_job(name="X", owner="Y", description="", job_id=created.job_id)

        updated = repository.update(changes, timeout=5)

        assert updated == changes
        assert repository.get(created.job_id, timeout=5) == changes

    def test_update_unknown_is_none_and_inserts_nothing(self, repository):
        assert repository.update(create_job(job_id=create_job_id()), timeout=5) is None
        assert list(repository.iter_all(timeout=5)) == []

    def test_delete_is_true_once(self, repository):
        created = repository.insert(create_job(), timeout=5)

        assert repository.delete(created.job_id, timeout=5) is True
        assert repository.delete(created.job_id, timeout=5) is False
        assert repository.get(created.job_id, timeout=5) is None

    def test_iter_all_yields_each_job_once(self, repository):
        created = [repository.insert(create_job(name=f"job-{index}"), timeout=5) for index in range(4)]

        listed = list(repository.iter_all(timeout=5))

        assert sorted(str(job.job_id) for job in listed) == sorted(str(job.job_id) for job in created)

    def test_iter_all_can_be_closed_early(self, repository):
        for index in range(3):
            repository.insert(create_job(name=f"job-{index}"), timeout=5)
        jobs = repository.iter_all(timeout=5)

        next(jobs)
        jobs.close()

        assert len(list(repository.iter_all(timeout=5))) == 3

    def test_ping(self, repository):
        assert repository.ping(timeout=5) is True
